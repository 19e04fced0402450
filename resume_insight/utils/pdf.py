from pypdf import PdfReader


def extract_pdf_text(file) -> tuple[str, int]:
	"""Text layer of every page, joined with newlines. Returns (text, pages)."""
	reader = PdfReader(file)
	text = []
	for p in reader.pages:
		text.append(p.extract_text() or "")
	return "\n".join(text), len(text)
