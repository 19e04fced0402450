from docx import Document
from docx.table import Table


def extract_docx_text(file) -> str:
	"""Raw text of a .docx package: paragraphs and table cells in document order."""
	document = Document(file)
	lines = []
	for block in document.iter_inner_content():
		if isinstance(block, Table):
			for row in block.rows:
				lines.extend(cell.text for cell in row.cells)
		else:
			lines.append(block.text)
	return "\n".join(lines)
