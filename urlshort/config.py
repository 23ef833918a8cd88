from pydantic import BaseModel, Field, StrictStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class PathURL(BaseModel):
    path: StrictStr = ""
    url: StrictStr = ""


class RouteRule(BaseModel):
    prefix: str
    upstream: str


def _default_redirects() -> list[PathURL]:
    return [
        PathURL(path="/urlshort-godoc", url="https://godoc.org/github.com/gophercises/urlshort"),
        PathURL(path="/yaml-godoc", url="https://godoc.org/gopkg.in/yaml.v2"),
    ]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="URLSHORT_", env_file=".env")

    redirects: list[PathURL] = Field(default_factory=_default_redirects)
    redirect_file: str | None = None    # YAML or JSON; replaces `redirects` when set
    routes: list[RouteRule] = Field(default_factory=list)
    upstream_timeout: float = 20.0
    log_level: str = "INFO"

# process-wide config, overridable through URLSHORT_* env vars
settings = Settings()
