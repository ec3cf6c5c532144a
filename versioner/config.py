import os

from dotenv import load_dotenv
from pydantic import BaseModel


class Settings(BaseModel):
    # inputs
    version_file: str = "package.json"  # VERSIONER_VERSION_FILE

    # outputs
    env_file: str = "build.env"  # VERSIONER_ENV_FILE
    github_output: str | None = None  # GITHUB_OUTPUT (set by GitHub Actions)
    write_version_file: bool = True  # VERSIONER_WRITE_VERSION ("0" to disable)

    # console
    structured_logging: bool = False  # VERSIONER_STRUCT_LOG ("1" to enable)
    color: bool = True  # disabled when NO_COLOR is set


def load_settings(**overrides) -> Settings:
    load_dotenv()
    values = dict(
        version_file=os.getenv("VERSIONER_VERSION_FILE", "package.json") or "package.json",
        env_file=os.getenv("VERSIONER_ENV_FILE", "build.env") or "build.env",
        github_output=os.getenv("GITHUB_OUTPUT") or None,
        write_version_file=os.getenv("VERSIONER_WRITE_VERSION", "1") != "0",
        structured_logging=os.getenv("VERSIONER_STRUCT_LOG", "0") == "1",
        color=not os.getenv("NO_COLOR"),
    )
    # CLI flags left unset arrive as None and must not mask the environment
    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**values)
