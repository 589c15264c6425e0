import pytest

from scanner import (
    FAILED,
    IDLE,
    SCANNING,
    SUCCESS,
    Scanner,
    format_resume_for_ai,
    score_color,
)
from ai_gateway import AIGateway
from config import Settings
from stubs import StubClient, analysis_payload


@pytest.mark.parametrize("score, color", [
    (95, "green"), (80, "green"), (79, "yellow"), (60, "yellow"), (59, "red"), (0, "red"),
])
def test_score_color(score, color):
    assert score_color(score) == color


def test_format_resume_for_ai(resume):
    text = format_resume_for_ai(resume)

    assert text.startswith("Name: Jane Doe\n")
    assert "Summary: Backend engineer with 6 years of Python.\n" in text
    assert "Skills: Python, Django, PostgreSQL\n" in text
    assert "Senior Engineer at Acme (2019-Present): Built billing APIs.\n" in text
    assert "B.Sc. Computer Science, TU Berlin (2018)" in text
    assert "Title:" not in text


def test_format_includes_headline_when_set(resume):
    assert "Title: Staff Engineer\n" in format_resume_for_ai({**resume, "headline": "Staff Engineer"})


def test_initial_state():
    scanner = Scanner()
    assert scanner.status == IDLE
    assert scanner.result is None
    assert scanner.error == ""


def test_empty_job_description_makes_no_call(resume, gateway, stub):
    scanner = Scanner()
    scanner.job_description = "   "

    scanner.scan(resume, gateway)
    assert scanner.status == FAILED
    assert scanner.error == "Please enter a Job Description."
    assert stub.calls == []


def test_missing_name_blocks_scan(resume, gateway, stub):
    scanner = Scanner()
    scanner.job_description = "Python developer"
    nameless = {**resume, "full_name": ""}

    assert not scanner.can_scan(nameless)
    scanner.scan(nameless, gateway)
    assert scanner.status == FAILED
    assert "full name" in scanner.error
    assert stub.calls == []


def test_successful_scan(resume, gateway):
    scanner = Scanner()
    scanner.job_description = "Python developer"

    assert scanner.can_scan(resume)
    scanner.scan(resume, gateway)
    assert scanner.status == SUCCESS
    assert scanner.result.score == 72
    assert scanner.error == ""


def test_scan_uses_formatted_resume(resume, gateway, stub):
    scanner = Scanner()
    scanner.job_description = "Python developer"
    scanner.scan(resume, gateway)

    assert format_resume_for_ai(resume) in stub.calls[0]["messages"][0]["content"]


def test_missing_credential_reports_configuration_error(resume):
    stub = StubClient(content=analysis_payload())
    scanner = Scanner()
    scanner.job_description = "Python developer"

    scanner.scan(resume, AIGateway(Settings(api_key=None), client=stub))
    assert scanner.status == FAILED
    assert "API Key is missing" in scanner.error
    assert stub.calls == []


def test_malformed_response_clears_previous_result(resume, settings):
    stub = StubClient(content=analysis_payload())
    gw = AIGateway(settings, client=stub)
    scanner = Scanner()
    scanner.job_description = "Python developer"
    scanner.scan(resume, gw)
    assert scanner.result is not None

    stub.content = "{not json"
    scanner.scan(resume, gw)
    assert scanner.status == FAILED
    assert scanner.result is None
    assert scanner.error.startswith("Malformed response from AI")


def test_empty_response_message_differs_from_transport_error(resume, settings):
    scanner = Scanner()
    scanner.job_description = "Python developer"

    scanner.scan(resume, AIGateway(settings, client=StubClient(content="")))
    empty_error = scanner.error
    scanner.scan(resume, AIGateway(settings, client=StubClient(error=ConnectionError("dns failure"))))

    assert empty_error == "No response from AI"
    assert scanner.error == "dns failure"


def test_rescan_clears_error_before_call(resume, settings):
    seen = {}

    class Probe:
        def analyze(self, resume_text, job_description):
            seen["status"] = scanner.status
            seen["error"] = scanner.error
            seen["result"] = scanner.result
            return AIGateway(settings, client=StubClient(content=analysis_payload())).analyze(
                resume_text, job_description)

    scanner = Scanner()
    scanner.job_description = ""
    scanner.scan(resume, Probe())
    assert scanner.error

    scanner.job_description = "Python developer"
    scanner.scan(resume, Probe())
    assert seen == {"status": SCANNING, "error": "", "result": None}
    assert scanner.status == SUCCESS


def test_scan_ignored_while_in_flight(resume, gateway, stub):
    scanner = Scanner()
    scanner.job_description = "Python developer"
    scanner.status = SCANNING

    assert not scanner.can_scan(resume)
    scanner.scan(resume, gateway)
    assert stub.calls == []


def test_unexpected_error_fails_scan(resume):
    class Broken:
        def analyze(self, resume_text, job_description):
            raise RuntimeError("kaput")

    scanner = Scanner()
    scanner.job_description = "Python developer"
    scanner.scan(resume, Broken())
    assert scanner.status == FAILED
    assert "kaput" in scanner.error


def test_failed_scan_leaves_resume_untouched(resume, settings):
    import copy
    before = copy.deepcopy(resume)
    scanner = Scanner()
    scanner.job_description = "Python developer"
    scanner.scan(resume, AIGateway(settings, client=StubClient(error=ConnectionError("x"))))
    assert resume == before
