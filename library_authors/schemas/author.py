from datetime import date

from pydantic import BaseModel


class AuthorRecord(BaseModel):
    first_name: str
    family_name: str
    date_of_birth: date | None = None
    date_of_death: date | None = None
