"""Freight spreadsheet loader: pasted text, cell arrays and workbook files."""

import logging
import re
import zipfile
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

from config import (
    FALLBACK_COLUMN_ORDER,
    FLAG_DEBUG,
    HEADER_SYNONYMS,
    MIN_HEADER_MATCHES,
    RECOGNIZED_COLUMNS,
)
from models import ProcessingResult, RawRow
from utils.helpers import cell_text

_LINE_BREAK = re.compile(r"\r?\n")


class FreightSheetLoader:
    """Turn a freight spreadsheet into RawRow records keyed by column name."""

    def __init__(
        self,
        *,
        recognized_columns=RECOGNIZED_COLUMNS,
        fallback_order: Sequence[str] = FALLBACK_COLUMN_ORDER,
        synonyms: Optional[Dict[str, str]] = None,
        min_header_matches: int = MIN_HEADER_MATCHES,
    ):
        """
        Initialize loader.

        Args:
            recognized_columns: Column names accepted in a header row
            fallback_order: Positional column order when no header is found
            synonyms: Header spellings mapped to their canonical name
            min_header_matches: Known names needed to treat line 1 as header
        """
        self.recognized_columns = frozenset(recognized_columns)
        self.fallback_order = list(fallback_order)
        self.synonyms = dict(HEADER_SYNONYMS if synonyms is None else synonyms)
        self.min_header_matches = min_header_matches

        self.source_name = ""
        self.has_header = False
        self.column_index: Dict[str, int] = {}
        self.rows: List[RawRow] = []

    # ============================================================================
    # HEADER DETECTION
    # ============================================================================

    def normalize_header(self, cell) -> str:
        """Trim a header cell and map DUE spellings to DU-E."""
        name = cell_text(cell)
        return self.synonyms.get(name, name)

    def detect_header(self, first_row: Sequence) -> bool:
        """
        Decide whether the first line is a header row.

        True when at least `min_header_matches` cells, after synonym
        normalization, are exactly (case-sensitive) recognized column names.
        """
        names = [self.normalize_header(c) for c in first_row]
        matched = [n for n in names if n in self.recognized_columns]
        return len(matched) >= self.min_header_matches

    def _bind_columns(self, first_row: Sequence) -> Dict[str, int]:
        if not self.has_header:
            return {name: idx for idx, name in enumerate(self.fallback_order)}

        index: Dict[str, int] = {}
        for idx, cell in enumerate(first_row):
            name = self.normalize_header(cell)
            if name in self.recognized_columns and name not in index:
                index[name] = idx
        return index

    # ============================================================================
    # LOADING
    # ============================================================================

    @staticmethod
    def split_text(text: str) -> List[List[str]]:
        """Split tab-separated text into cells, dropping blank lines."""
        lines = [ln for ln in _LINE_BREAK.split(text or "") if ln.strip()]
        return [ln.split("\t") for ln in lines]

    def load_text(self, text: str, source_name: str = "Dados colados") -> ProcessingResult:
        """
        Load tab-separated text copied from a spreadsheet.

        Returns:
            ProcessingResult with the list of RawRow on success
        """
        return self.load_cells(self.split_text(text), source_name=source_name)

    def load_cells(self, cells: Sequence[Sequence], source_name: str = "") -> ProcessingResult:
        """
        Load a 2-D array of cells (first row may or may not be a header).

        Returns:
            ProcessingResult with the list of RawRow on success, or an
            "insufficient data" failure when no data line remains
        """
        self.source_name = source_name
        self.rows = []
        self.column_index = {}

        lines = [list(r) for r in cells if r is not None and any(cell_text(c) for c in r)]
        if not lines:
            logging.warning(f"[{source_name}] No data lines found.")
            return ProcessingResult.fail("Dados insuficientes: nenhuma linha com dados foi encontrada.")

        self.has_header = self.detect_header(lines[0])
        self.column_index = self._bind_columns(lines[0])
        data_lines = lines[1:] if self.has_header else lines

        if FLAG_DEBUG:
            print(f"[DEBUG] header={self.has_header} columns={self.column_index}")

        if not data_lines:
            logging.warning(f"[{source_name}] Header found but no data lines follow it.")
            return ProcessingResult.fail("Dados insuficientes: a planilha contém apenas o cabeçalho.")

        for line in data_lines:
            row: RawRow = {}
            for name, idx in self.column_index.items():
                row[name] = cell_text(line[idx]) if idx < len(line) else ""
            self.rows.append(row)

        logging.info(
            f"[{source_name}] Loaded {len(self.rows)} rows "
            f"({'header detected' if self.has_header else 'fixed column order'})."
        )
        return ProcessingResult.ok(self.rows)

    def _read_text_file(self, file: Path) -> str:
        """Read a text export trying several encodings."""
        tried_encs = ["utf-8", "utf-8-sig", "cp1252", "latin1"]
        for enc in tried_encs:
            try:
                return file.read_text(encoding=enc)
            except UnicodeDecodeError:
                continue
        return file.read_text(encoding="latin1", errors="replace")

    def load_file(self, path) -> ProcessingResult:
        """
        Load a workbook (.xlsx/.xls, first sheet) or a tab-separated text file.

        Read errors are returned as a failure result, never raised.
        """
        file = Path(path)
        try:
            if file.suffix.lower() in (".xlsx", ".xls", ".xlsm"):
                df = pd.read_excel(file, sheet_name=0, header=None, dtype=object)
                cells = df.where(pd.notna(df), "").values.tolist()
            else:
                return self.load_text(self._read_text_file(file), source_name=file.name)
        except (OSError, ValueError, zipfile.BadZipFile) as e:
            logging.error(f"[{file.name}] Could not read file: {e}")
            return ProcessingResult.fail("Erro ao ler o arquivo. Verifique se é um arquivo Excel válido.")

        return self.load_cells(cells, source_name=file.name)

    # ============================================================================
    # VALIDATION
    # ============================================================================

    def missing_columns(self, required: Sequence[str]) -> List[str]:
        """Required column names that the detected header does not provide."""
        return [col for col in required if col not in self.column_index]

    def require(self, required: Sequence[str]) -> ProcessingResult:
        """
        Check that the loaded layout provides the columns a feature needs.

        Returns:
            Success with the loaded rows, or a failure listing missing names
        """
        missing = self.missing_columns(required)
        if missing:
            logging.warning(f"[{self.source_name}] Missing columns: {', '.join(missing)}")
            return ProcessingResult.fail(
                "Colunas obrigatórias não encontradas na planilha.",
                missing_columns=missing,
            )
        return ProcessingResult.ok(self.rows)

    def get_rows(self) -> List[RawRow]:
        return self.rows
