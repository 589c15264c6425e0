import pytest

from config import Settings
from ai_gateway import AIGateway
from schema_resume import new_resume
from stubs import StubClient, analysis_payload


@pytest.fixture
def settings():
    return Settings(provider="openai", model="gpt-4o-mini", api_key="sk-test")


@pytest.fixture
def stub():
    return StubClient(content=analysis_payload())


@pytest.fixture
def gateway(settings, stub):
    return AIGateway(settings, client=stub)


@pytest.fixture
def resume():
    data = new_resume()
    data.update(
        full_name="Jane Doe",
        email="jane@example.com",
        phone="555-0100",
        location="Berlin, Germany",
        summary="Backend engineer with 6 years of Python.",
        skills="Python, Django, PostgreSQL",
    )
    data["experience"] = [{
        "id": "exp-1",
        "company": "Acme",
        "role": "Senior Engineer",
        "start_date": "2019",
        "end_date": "Present",
        "description": "Built billing APIs.",
    }]
    data["education"] = [{
        "id": "edu-1",
        "school": "TU Berlin",
        "degree": "B.Sc. Computer Science",
        "graduation_date": "2018",
    }]
    return data
