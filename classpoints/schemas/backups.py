from pydantic import BaseModel


class BackupResponse(BaseModel):
    backup_path: str


class RestoreRequest(BaseModel):
    backup_path: str
