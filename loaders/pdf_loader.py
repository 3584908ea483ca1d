"""PDF text extraction used by the DU-E and cargo manifest extractors."""

import logging
from pathlib import Path


def extract_text_from_pdf(pdf_path) -> str:
    """
    Extract the text of every page of a PDF, pages joined by newlines.

    Args:
        pdf_path: Path to the PDF file

    Returns:
        Full document text ("" for image-only pages)

    Raises:
        FileNotFoundError: If the file does not exist
    """
    import pdfplumber

    pdf_path = Path(pdf_path)
    if not pdf_path.exists():
        raise FileNotFoundError(f"PDF não encontrado: {pdf_path}")

    chunks: list[str] = []
    with pdfplumber.open(pdf_path) as pdf:
        for page in pdf.pages:
            text = page.extract_text() or ""
            if text.strip():
                chunks.append(text)

    logging.debug(f"[{pdf_path.name}] Extracted {sum(len(c) for c in chunks)} chars")
    return "\n".join(chunks)
