from .freight_loader import FreightSheetLoader
from .pdf_loader import extract_text_from_pdf

__all__ = ["FreightSheetLoader", "extract_text_from_pdf"]
