from contextlib import contextmanager
from typing import Generator
from tempfile import mkstemp
from pathlib import Path
import os



@contextmanager
def create_temp_file(content: str | bytes | None = None, *, folder_path: Path | None = None) -> Generator[Path, None, None]:
    file_descriptor, temp_file_path_str = mkstemp(dir=folder_path)
    os.close(file_descriptor)
    temp_file_path = Path(temp_file_path_str)
    try:
        if content is not None:
            if isinstance(content, bytes):
                temp_file_path.write_bytes(content)
            else:
                temp_file_path.write_text(content, encoding="utf-8")
        yield temp_file_path
    finally:
        temp_file_path.unlink(missing_ok=True)


def write_text_atomically(file_path: Path, content: str) -> None:
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with create_temp_file(content, folder_path=file_path.parent) as temp_file_path:
        os.replace(temp_file_path, file_path)
