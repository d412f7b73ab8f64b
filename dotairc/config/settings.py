import os
from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables from .env file
load_dotenv()

PACKAGE_ROOT = Path(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
DEFAULT_TEMPLATES_DIR = PACKAGE_ROOT / "templates"
DEFAULT_OUTPUT = ".airc"


class Settings(BaseModel):
    """
    Runtime configuration. Command-line flags take precedence over these values.
    """
    templates_dir: Path = Field(DEFAULT_TEMPLATES_DIR, description="Directory containing <identifier>.md templates.")
    output_path: Path = Field(Path(DEFAULT_OUTPUT), description="File the combined document is written to.")

    @classmethod
    def from_env(cls) -> "Settings":
        values = {}
        templates_dir = os.getenv("DOTAIRC_TEMPLATES_DIR")
        if templates_dir:
            values["templates_dir"] = Path(templates_dir).expanduser()
        output_path = os.getenv("DOTAIRC_OUTPUT")
        if output_path:
            values["output_path"] = Path(output_path).expanduser()
        return cls(**values)
