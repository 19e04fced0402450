import unittest
from unittest.mock import patch

from doc_builders import RESUME_LINES, make_docx, make_pdf

from resume_insight.core.errors import ContentTooShort, ScannedOrEmptyDocument
from resume_insight.nlp.extractor import DOCX_MIME
from resume_insight.schemas.base import AnalysisResult
from resume_insight.services.analyze_service import analyze_document, analyze_text


class AnalyzeTextTests(unittest.TestCase):
    def test_composes_sections_score_and_jobs(self):
        result = analyze_text("Experience: Software Engineer. Skills: React, JavaScript.")
        self.assertIsInstance(result, AnalysisResult)
        self.assertEqual(result.score, 51)
        self.assertIn("Resume is too short", result.cons)
        self.assertEqual(result.jobs[0].title, "Frontend Developer")
        self.assertEqual(result.jobs[0].matchPercentage, "92%")

    def test_job_count_bounds(self):
        for text in ("nothing relevant here at all, just a plain sentence.", "react python manager " * 5):
            self.assertTrue(1 <= len(analyze_text(text).jobs) <= 3)

    def test_result_is_immutable(self):
        result = analyze_text("Education and projects listed plainly in a single line here.")
        with self.assertRaises(Exception):
            result.score = 10  # type: ignore[misc]

    def test_deterministic(self):
        text = " ".join(RESUME_LINES)
        self.assertEqual(analyze_text(text).model_dump_json(), analyze_text(text).model_dump_json())


class AnalyzeDocumentTests(unittest.TestCase):
    def test_pdf_pipeline_is_idempotent(self):
        data = make_pdf(RESUME_LINES)
        first = analyze_document(data, "application/pdf", "cv.pdf")
        second = analyze_document(data, "application/pdf", "cv.pdf")
        self.assertEqual(first.model_dump_json(), second.model_dump_json())
        self.assertEqual(
            [j.title for j in first.jobs], ["Frontend Developer", "Data Analyst", "Project Manager"]
        )
        self.assertIn("Professional experience section detected", first.pros)

    def test_docx_pipeline(self):
        result = analyze_document(make_docx(RESUME_LINES), DOCX_MIME, "cv.docx")
        self.assertIn("contains 5 key professional sections", result.summary)

    def test_short_content_fails_before_scoring(self):
        data = make_docx(["Jane Doe", "jane@example.com", "555 1234"])
        with patch("resume_insight.services.analyze_service.score_resume") as scorer:
            with self.assertRaises(ContentTooShort):
                analyze_document(data, DOCX_MIME, "cv.docx")
        scorer.assert_not_called()

    def test_scanned_pdf_never_reaches_scorer(self):
        with patch("resume_insight.services.analyze_service.score_resume") as scorer:
            with self.assertRaises(ScannedOrEmptyDocument):
                analyze_document(make_pdf(["Page 1 of 1"]), "application/pdf", "scan.pdf")
        scorer.assert_not_called()


if __name__ == "__main__":
    unittest.main()
