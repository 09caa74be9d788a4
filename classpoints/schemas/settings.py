from pydantic import BaseModel


class DisplaySettings(BaseModel):
    theme: str
    custom_background: str


class DisplaySettingsUpdateRequest(BaseModel):
    theme: str
    custom_background: str
