# schemas/challenge.py
from pydantic import BaseModel


class ChallengeOut(BaseModel):
    token: str
    image_url: str
