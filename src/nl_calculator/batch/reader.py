"""Load batches of queries from text files or archives."""
import lzma
from pathlib import Path
import tarfile
import tempfile
from typing import List
import zipfile

import py7zr
import py7zr.exceptions
from pydantic import BaseModel, ConfigDict, Field

from nl_calculator.common.logger import logger


class QueryFileReader(BaseModel):
    """
    Reader turning a query file into a list of queries, one per non-blank line.

    Supported inputs:
    - plain .txt files
    - .zip, .tar.xz and .7z archives holding at least one .txt file
    """

    model_config = ConfigDict(frozen=True)

    encoding: str = Field(default="utf-8", description="Encoding of the query text")

    def read(self, input_file: Path) -> List[str]:
        """
        Read all queries from a text file or archive.

        :param Path input_file: Path to the input file or archive

        :return: Stripped, non-empty query lines
        :rtype: List[str]
        :raises ValueError: If the archive format is unsupported or contains no .txt file
        """
        if input_file.suffix == ".txt":
            content = input_file.read_text(encoding=self.encoding)
        else:
            content = self._extract_archive(input_file)

        queries = [line.strip() for line in content.splitlines() if line.strip()]
        logger.info(f"📄 Loaded {len(queries)} queries from {input_file}")
        return queries

    def _extract_archive(self, archive_path: Path) -> str:
        """
        Return the content of the first .txt file found in a supported archive.

        Supported formats:
        - .zip
        - .tar.xz
        - .7z

        :param Path archive_path: Path to the archive file

        :return: Content of the first .txt member
        :rtype: str
        :raises ValueError: If the archive is corrupt, holds no .txt file or its format is unsupported
        """
        try:
            if archive_path.suffix == ".zip":
                return self._read_zip(archive_path)
            elif archive_path.suffixes[-2:] == [".tar", ".xz"]:
                return self._read_tar_xz(archive_path)
            elif archive_path.suffix == ".7z":
                return self._read_7z(archive_path)
        except (zipfile.BadZipFile, tarfile.TarError, lzma.LZMAError, EOFError, py7zr.exceptions.Bad7zFile) as exc:
            raise ValueError(f"📄❌ Corrupt archive {archive_path.name}: {exc}") from exc

        raise ValueError(f"📄❌ Unsupported query file format: {archive_path.suffix}")

    def _read_zip(self, archive_path: Path) -> str:
        with zipfile.ZipFile(archive_path, "r") as zf:
            txt_files = [f for f in zf.namelist() if f.endswith(".txt")]
            if not txt_files:
                raise ValueError("📄❌ No .txt file found in zip archive")
            # Read the member from the archive, its name is never used as a host path
            return zf.read(txt_files[0]).decode(self.encoding)

    def _read_tar_xz(self, archive_path: Path) -> str:
        with tarfile.open(archive_path, "r:xz") as tf:
            txt_members = [m for m in tf.getmembers() if m.isfile() and m.name.endswith(".txt")]
            if not txt_members:
                raise ValueError("📄❌ No .txt file found in tar.xz archive")
            return tf.extractfile(txt_members[0]).read().decode(self.encoding)

    def _read_7z(self, archive_path: Path) -> str:
        # py7zr only extracts to disk; files are looked up inside the temporary directory only
        with tempfile.TemporaryDirectory() as tmpdir:
            tmpdir_path = Path(tmpdir)
            with py7zr.SevenZipFile(archive_path, mode="r") as archive:
                txt_files = [f for f in archive.getnames() if f.endswith(".txt")]
                if not txt_files:
                    raise ValueError("📄❌ No .txt file found in 7z archive")
                archive.extract(path=tmpdir_path, targets=[txt_files[0]])

            extracted = sorted(p for p in tmpdir_path.rglob("*.txt") if p.is_file())
            if not extracted:
                raise ValueError(f"📄❌ Could not extract {txt_files[0]!r} from 7z archive")
            return extracted[0].read_text(encoding=self.encoding)
