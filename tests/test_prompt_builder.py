import pytest

from talent_scout.domain.entities import Persona
from talent_scout.services.prompt_builder import (
    INTENSITY_GUIDELINES,
    PERSONA_PROMPTS,
    build_assessment_prompt,
    build_not_found_prompt,
    temperature_for,
)


class TestTemperature:
    @pytest.mark.parametrize(
        ("intensity", "temperature"),
        [(1, 0.3), (2, 0.5), (3, 0.7), (4, 0.9), (5, 1.2)],
    )
    def test_table(self, intensity, temperature):
        assert temperature_for(intensity) == temperature

    @pytest.mark.parametrize("intensity", [0, 6, -1, 42])
    def test_out_of_table_uses_default(self, intensity):
        assert temperature_for(intensity) == 0.7


def test_every_persona_has_a_prompt():
    assert set(PERSONA_PROMPTS) == set(Persona)


class TestAssessmentPrompt:
    def test_includes_persona_guideline_and_username(self):
        prompt = build_assessment_prompt("octocat", Persona.EPIDEMIOLOGIST, 5, year=2026)

        assert prompt.startswith(PERSONA_PROMPTS[Persona.EPIDEMIOLOGIST])
        assert INTENSITY_GUIDELINES[5] in prompt
        assert 'GitHub username: "octocat"' in prompt
        assert "Current year is 2026" in prompt

    def test_forbids_markdown(self):
        prompt = build_assessment_prompt("octocat")

        assert "NO markdown formatting" in prompt
        assert "TECHNICAL SKILLS ANALYSIS" in prompt
        assert "HEALTH TECH APPLICATIONS" in prompt
        assert "RECOMMENDATIONS & OPPORTUNITIES" in prompt

    def test_accepts_persona_value_strings(self):
        prompt = build_assessment_prompt("octocat", "health-systems-analyst")

        assert PERSONA_PROMPTS[Persona.HEALTH_SYSTEMS_ANALYST] in prompt

    def test_unknown_persona_and_intensity_fall_back(self):
        prompt = build_assessment_prompt("octocat", "pirate", 9)

        assert PERSONA_PROMPTS[Persona.PUBLIC_HEALTH_RECRUITER] in prompt
        assert INTENSITY_GUIDELINES[3] in prompt


class TestNotFoundPrompt:
    def test_mentions_missing_username(self):
        prompt = build_not_found_prompt("no-such-user-xyz", Persona.TECHNICAL_ASSESSOR, 1)

        assert '"no-such-user-xyz"' in prompt
        assert "doesn't exist on GitHub" in prompt
        assert PERSONA_PROMPTS[Persona.TECHNICAL_ASSESSOR] in prompt
        assert INTENSITY_GUIDELINES[1] in prompt
        assert "tools" not in prompt
