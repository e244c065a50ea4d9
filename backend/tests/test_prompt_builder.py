from services.prompt_builder import (
    MAX_JOB_DESCRIPTION_CHARS,
    MAX_RESUME_CHARS,
    build_analysis_prompt,
    truncate_inputs,
)


def test_truncate_long_inputs_to_exact_limits():
    request = truncate_inputs("r" * 5000, "j" * 3500)
    assert len(request.resume_text) == MAX_RESUME_CHARS == 4000
    assert len(request.job_description) == MAX_JOB_DESCRIPTION_CHARS == 3000


def test_truncate_keeps_short_inputs():
    request = truncate_inputs("Python dev", "Need Python")
    assert request.resume_text == "Python dev"
    assert request.job_description == "Need Python"


def test_prompt_contains_inputs_verbatim():
    prompt = build_analysis_prompt("Experienced backend engineer, Node, SQL", "Go experience")
    assert "RESUME:\nExperienced backend engineer, Node, SQL" in prompt
    assert "JOB DESCRIPTION:\nGo experience" in prompt
    assert prompt.index("RESUME:") < prompt.index("JOB DESCRIPTION:")


def test_prompt_has_instructions_and_json_shape():
    prompt = build_analysis_prompt("a", "b")
    assert "ATS Resume Analyzer" in prompt
    assert "Respond ONLY with valid JSON." in prompt
    assert '"atsScore": 0' in prompt
    assert '"matchedSkills": []' in prompt
    assert '"missingSkills": []' in prompt
    assert '"improvements": []' in prompt


def test_prompt_is_deterministic():
    assert build_analysis_prompt("x", "y") == build_analysis_prompt("x", "y")
