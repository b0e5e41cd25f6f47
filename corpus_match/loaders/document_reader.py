# Path: corpus_match/loaders/document_reader.py
"""
Document Reader for corpus_match

Reads raw patent documents from disk for the command line.

Text is returned exactly as stored; no entity resolution and no SGML
normalization happen here, since the matcher scans the raw markup.

Encoding strategy:
1. Try the configured default encoding
2. Try configured fallback encodings in order
3. Final fallback: default encoding with replacement characters
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config_loader import ConfigLoader
from ..core.logger import get_input_logger


@dataclass
class LoadedDocument:
    """
    A document read from disk.

    Attributes:
        path: Source file
        text: Raw markup
        encoding: Encoding that decoded the file
        replaced_characters: Whether undecodable bytes were replaced
    """
    path: Path
    text: str
    encoding: str
    replaced_characters: bool = False


class DocumentReader:
    """
    Reads document files with encoding fallback.

    Example:
        reader = DocumentReader()
        document = reader.read(Path('pg020101.sgm'))
        matcher.bind(document.text, PatentDocType.GRANT)
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize reader.

        Args:
            config: Optional ConfigLoader instance (creates new if not provided)
        """
        self.config = config if config else ConfigLoader()
        self.logger = get_input_logger('document_reader')
        self.default_encoding = self.config.get('default_encoding', 'utf-8')

        fallbacks = self.config.get('encoding_fallbacks') or []
        self.encodings = [self.default_encoding] + [
            e for e in fallbacks if e.lower() != self.default_encoding.lower()
        ]

    def read(self, file_path: Path) -> LoadedDocument:
        """
        Read one document.

        Args:
            file_path: Path to the document

        Returns:
            LoadedDocument with the raw text

        Raises:
            FileNotFoundError: If the file does not exist
            IsADirectoryError: If the path is a directory
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"Document not found: {file_path}")
        if file_path.is_dir():
            raise IsADirectoryError(f"Path is a directory: {file_path}")

        raw = file_path.read_bytes()

        for encoding in self.encodings:
            try:
                text = raw.decode(encoding)
            except (UnicodeDecodeError, LookupError):
                continue
            self.logger.debug(f"Read {file_path.name} ({len(raw)} bytes, {encoding})")
            return LoadedDocument(path=file_path, text=text, encoding=encoding)

        self.logger.warning(
            f"No configured encoding decodes {file_path.name}; "
            f"replacing undecodable bytes"
        )
        return LoadedDocument(
            path=file_path,
            text=raw.decode(self.default_encoding, errors='replace'),
            encoding=self.default_encoding,
            replaced_characters=True,
        )


__all__ = ['DocumentReader', 'LoadedDocument']
