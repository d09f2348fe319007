import logging

from models import db, WeatherRecord

log = logging.getLogger(__name__)

# Read-only lookup of weather records by city; database errors propagate to the caller.
class WeatherRepository:
    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    # Primary-key lookup; None when the city is not stored.
    def get(self, city: str) -> WeatherRecord | None:
        record = self.session.get(WeatherRecord, city)
        if record is None:
            log.debug("No weather record for %r", city)
        return record
