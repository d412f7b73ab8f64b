import os
from pathlib import Path
from typing import Dict, List, Optional

TEMPLATE_SUFFIX = ".md"


class DirectoryTemplateLookup:
    """
    Reads templates from a directory holding one `<identifier>.md` file per technology.
    """

    def __init__(self, templates_dir):
        self.templates_dir = Path(templates_dir)

    def ensure_dir(self) -> Path:
        self.templates_dir.mkdir(parents=True, exist_ok=True)
        return self.templates_dir

    def template_path(self, identifier: str) -> Optional[Path]:
        # Identifiers are bare file stems; anything that could leave the directory never resolves.
        if identifier in (".", "..") or "/" in identifier or os.sep in identifier:
            return None
        if os.altsep and os.altsep in identifier:
            return None
        return self.templates_dir / f"{identifier}{TEMPLATE_SUFFIX}"

    def __call__(self, identifier: str) -> Optional[str]:
        path = self.template_path(identifier)
        if path is None:
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError):
            return None

    def available(self) -> List[str]:
        if not self.templates_dir.is_dir():
            return []
        return sorted(
            (p.stem for p in self.templates_dir.glob(f"*{TEMPLATE_SUFFIX}") if p.is_file()),
            key=str.lower,
        )


class DictTemplateLookup:
    def __init__(self, templates: Dict[str, str]):
        self.templates = dict(templates)

    def __call__(self, identifier: str) -> Optional[str]:
        return self.templates.get(identifier)

    def available(self) -> List[str]:
        return sorted(self.templates, key=str.lower)
