import unittest
from unittest.mock import patch

from doc_builders import RESUME_LINES, make_docx, make_pdf

from resume_insight.core.errors import (
    EmptyOrUnreadableDocument,
    ExtractionError,
    ExtractionFailed,
    ScannedOrEmptyDocument,
    UnsupportedFormat,
)
from resume_insight.nlp.extractor import DOCX_MIME, DocumentFormat, extract_text, resolve_format


class ResolveFormatTests(unittest.TestCase):
    def test_mime_type_wins(self):
        self.assertIs(resolve_format("application/pdf", "resume.docx"), DocumentFormat.PDF)
        self.assertIs(resolve_format(DOCX_MIME, "resume.bin"), DocumentFormat.DOCX)

    def test_mime_parameters_ignored(self):
        self.assertIs(resolve_format("Application/PDF; charset=binary", None), DocumentFormat.PDF)

    def test_suffix_fallback_for_generic_type(self):
        self.assertIs(resolve_format("application/octet-stream", "CV.DOCX"), DocumentFormat.DOCX)
        self.assertIs(resolve_format(None, "cv.Pdf"), DocumentFormat.PDF)
        self.assertIs(resolve_format("", "cv.docx"), DocumentFormat.DOCX)

    def test_unsupported(self):
        for ctype, name in [("text/plain", "cv.txt"), ("application/msword", "cv.doc"), (None, None)]:
            with self.assertRaises(UnsupportedFormat):
                resolve_format(ctype, name)


class ExtractTextTests(unittest.TestCase):
    def test_pdf_text_layer(self):
        text = extract_text(make_pdf(RESUME_LINES), "application/pdf", "cv.pdf")
        self.assertIn("Jane Doe", text)
        self.assertIn("Senior Engineer at Acme Corp", text)

    def test_pdf_too_little_text_is_scanned(self):
        for lines in ([], ["Hi there!!"]):
            with self.assertRaises(ScannedOrEmptyDocument) as ctx:
                extract_text(make_pdf(lines), "application/pdf", "scan.pdf")
            self.assertEqual(ctx.exception.status_code, 422)
            self.assertTrue(ctx.exception.message.startswith("Failed to read file: This PDF appears to be scanned"))

    def test_corrupt_pdf_wrapped(self):
        with self.assertRaises(ExtractionFailed) as ctx:
            extract_text(b"%PDF-1.7\nthis is not really a pdf", "application/pdf", "bad.pdf")
        self.assertIsNotNone(ctx.exception.__cause__)
        self.assertTrue(ctx.exception.message.startswith("Failed to read file: "))

    def test_docx_paragraphs_and_tables(self):
        data = make_docx(
            ["Jane Doe", "Experience: Engineer at Acme"],
            table_rows=[["Skills", "Python, SQL"], ["Education", "State University"]],
        )
        text = extract_text(data, DOCX_MIME, "cv.docx")
        lines = text.splitlines()
        self.assertLess(lines.index("Jane Doe"), lines.index("Python, SQL"))
        self.assertIn("State University", lines)

    def test_docx_suffix_with_generic_mime(self):
        data = make_docx(RESUME_LINES)
        text = extract_text(data, "application/octet-stream", "Resume.DOCX")
        self.assertIn("B.Sc. Computer Science", text)

    def test_empty_docx(self):
        with self.assertRaises(EmptyOrUnreadableDocument):
            extract_text(make_docx(["   ", "short"]), DOCX_MIME, "empty.docx")

    def test_corrupt_docx_wrapped(self):
        with self.assertRaises(ExtractionFailed):
            extract_text(b"PK\x03\x04 not a real archive", DOCX_MIME, "bad.docx")

    def test_unsupported_never_touches_parsers(self):
        with patch("resume_insight.nlp.extractor.extract_pdf_text") as pdf, \
                patch("resume_insight.nlp.extractor.extract_docx_text") as docx:
            with self.assertRaises(UnsupportedFormat):
                extract_text(b"plain text resume", "text/plain", "cv.txt")
        pdf.assert_not_called()
        docx.assert_not_called()

    def test_parser_faults_never_escape_raw(self):
        with patch("resume_insight.nlp.extractor.extract_pdf_text", side_effect=OSError("disk went away")):
            with self.assertRaises(ExtractionError) as ctx:
                extract_text(b"%PDF-", "application/pdf", "cv.pdf")
        self.assertEqual(ctx.exception.reason, "disk went away")


if __name__ == "__main__":
    unittest.main()
