from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

class WeatherRecord(db.Model):
    __tablename__ = "weather"

    city = db.Column(db.String(255), primary_key=True)
    description = db.Column(db.String(255), nullable=True)
    icon = db.Column(db.String(255), nullable=True)

    # JSON shape returned by GET /weather/city
    def to_dict(self):
        return {
            "city": self.city,
            "description": self.description,
            "icon": self.icon,
        }

    def __repr__(self):
        return f"<WeatherRecord {self.city}: {self.description} ({self.icon})>"
