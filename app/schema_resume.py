import json
import uuid

# canonical schema (empty lists – no placeholders)
RESUME_SCHEMA = {
    "full_name": "",
    "headline": "",
    "email": "",
    "phone": "",
    "location": "",
    "summary": "",
    "skills": "",        # comma separated, split only when rendered
    "experience": [],
    "education": [],
}

EXPERIENCE_SCHEMA = {
    "id": "",
    "company": "",
    "role": "",
    "start_date": "",
    "end_date": "",
    "description": "",
}

EDUCATION_SCHEMA = {
    "id": "",
    "school": "",
    "degree": "",
    "graduation_date": "",
}

SCALAR_FIELDS = [k for k, v in RESUME_SCHEMA.items() if isinstance(v, str)]


def _new_id() -> str:
    return uuid.uuid4().hex


def new_resume() -> dict:
    return json.loads(json.dumps(RESUME_SCHEMA))


def new_experience() -> dict:
    return {**EXPERIENCE_SCHEMA, "id": _new_id()}


def new_education() -> dict:
    return {**EDUCATION_SCHEMA, "id": _new_id()}
