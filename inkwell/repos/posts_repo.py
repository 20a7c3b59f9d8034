from pathlib import Path
from typing import List

from inkwell.services.content_parser import MARKUP_BY_EXTENSION


class FilesystemPostsRepo:
    def __init__(self, root: Path | str):
        self.root = Path(root)

    def list_post_files(self) -> List[Path]:
        if not self.root.is_dir():
            raise FileNotFoundError(f"Content directory not found: {self.root}")
        return sorted(
            path
            for path in self.root.rglob("*")
            if path.is_file() and self._is_post_file(path)
        )

    def read_post_file(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def relative_source(self, path: Path) -> str:
        return Path(path).relative_to(self.root).as_posix()

    def _is_post_file(self, path: Path) -> bool:
        if path.suffix.lower() not in MARKUP_BY_EXTENSION:
            return False
        parts = path.relative_to(self.root).parts
        if any(part.startswith(".") for part in parts):
            return False
        # Section index files such as _index.md are not posts
        return not path.name.startswith("_")
