from pydantic import BaseModel, Field


class ConnectionConfig(BaseModel):
    """Where pages are fetched from and how they are parsed."""

    domain: str
    scheme: str = "http"
    html_parser: str = "html.parser"
    sleep_sec: float = Field(default=0.0, ge=0.0)

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.domain}/"
