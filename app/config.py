from datetime import datetime

from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    tracker_api_key: str | None = None
    log_level: str = "INFO"

    # Challenge window (time progress bar)
    challenge_start: datetime = datetime(2026, 2, 23)
    challenge_end: datetime = datetime(2026, 6, 25)

    # Google Sheets sync. Sheet id may also be the full docs.google.com URL.
    google_sheet_id: str | None = None
    google_api_key: str | None = None
    sheets_base_url: str = "https://sheets.googleapis.com"
    sheets_range: str = "Sheet1!A2:E50"  # Name, Current, Target, Unit, Category
    sheets_timeout_seconds: float = 15.0

    default_unit: str = "Units"  # When the Unit column is empty

    model_config = {"env_file": ".env", "extra": "ignore"}

    @model_validator(mode="after")
    def align_challenge_tz(self) -> "Settings":
        # One bound given with a UTC offset, the other naive: read the naive
        # one in the same zone so window arithmetic never mixes the two.
        start, end = self.challenge_start, self.challenge_end
        if start.tzinfo is None and end.tzinfo is not None:
            self.challenge_start = start.replace(tzinfo=end.tzinfo)
        elif end.tzinfo is None and start.tzinfo is not None:
            self.challenge_end = end.replace(tzinfo=start.tzinfo)
        return self


settings = Settings()
