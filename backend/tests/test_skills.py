"""Tests for skill normalization, extraction and comparison."""

import pytest

from models.schemas.skills_comparison import GapAnalysis, SkillComparison
from services.skills import (
    COMMON_SKILLS,
    SKILL_VARIATIONS,
    compare_skills,
    extract_skills_from_description,
    get_job_skills,
    get_variations,
    normalize_skill,
)


class TestNormalizeSkill:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("React", "react"),
            ("  Node.js ", "nodejs"),
            ("C++", "c++"),
            ("C#", "c#"),
            ("CI/CD", "cicd"),
            ("Machine Learning", "machinelearning"),
            ("!!!", ""),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_skill(raw) == expected

    @pytest.mark.parametrize("raw", ["React Native", "  .NET Core ", "C++ / C#", "", "Ünïcode"])
    def test_idempotent(self, raw):
        once = normalize_skill(raw)
        assert normalize_skill(once) == once


class TestGetVariations:
    def test_alias_resolves_to_canonical(self):
        assert get_variations("JS") == {"js", "javascript", "ecmascript"}

    def test_canonical_resolves_to_aliases(self):
        assert get_variations("JavaScript") == {"javascript", "js", "ecmascript"}

    def test_unknown_skill_returns_itself(self):
        assert get_variations("Haskell") == {"haskell"}

    def test_shared_alias_pulls_in_every_entry(self):
        # "testing" is an alias of both jest and vitest
        variations = get_variations("Testing")
        assert {"testing", "jest", "vitest"} <= variations

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            SKILL_VARIATIONS["rust"] = ("rs",)

    def test_table_values_are_string_tuples(self):
        for canonical, aliases in SKILL_VARIATIONS.items():
            assert isinstance(canonical, str)
            assert isinstance(aliases, tuple)
            assert all(isinstance(a, str) for a in aliases)


class TestExtractSkills:
    def test_none_and_empty(self):
        assert extract_skills_from_description(None) == []
        assert extract_skills_from_description("") == []

    def test_finds_vocabulary_in_order(self):
        desc = "We use Docker and Python, deploying to AWS."
        skills = extract_skills_from_description(desc)
        assert skills == ["Python", "AWS", "Docker"]

    def test_substring_matching_is_blunt(self):
        # "Go" hits inside "Google"; this is a recall-oriented prefilter
        assert "Go" in extract_skills_from_description("Experience at Google")

    def test_only_vocabulary_entries(self):
        skills = extract_skills_from_description("TypeScript, React, Next.js and Tailwind")
        assert set(skills) <= set(COMMON_SKILLS)
        assert {"TypeScript", "React", "Next.js", "Tailwind"} <= set(skills)


class TestGetJobSkills:
    def test_prefers_gap_analysis(self):
        gap = GapAnalysis(required_skills=["Rust", "Kafka"])
        assert get_job_skills(gap, "Python and Docker") == ["Rust", "Kafka"]

    def test_falls_back_to_description(self):
        gap = GapAnalysis(required_skills=[])
        assert get_job_skills(gap, "Python role") == ["Python"]
        assert get_job_skills(None, "Python role") == ["Python"]

    def test_nothing_available(self):
        assert get_job_skills(None, None) == []


class TestCompareSkills:
    def test_basic_scenario(self):
        result = compare_skills(
            ["React", "TypeScript", "Node.js"],
            ["React", "TypeScript", "Node.js", "AWS"],
        )
        assert isinstance(result, SkillComparison)
        assert result.matched == ["React", "TypeScript", "Node.js"]
        assert result.partial == []
        assert result.missing == ["AWS"]
        assert result.match_percentage == 75
        assert result.total == 4

    def test_alias_match(self):
        result = compare_skills(["JS"], ["JavaScript"])
        assert result.matched == ["JavaScript"]
        assert result.match_percentage == 100

    def test_partial_match(self):
        result = compare_skills(["React"], ["React Native"])
        assert result.partial == ["React Native"]
        assert result.matched == []
        assert result.match_percentage == 50

    def test_empty_candidate_skills(self):
        required = ["Python", "Docker"]
        result = compare_skills([], required)
        assert result.match_percentage == 0
        assert result.missing == required
        assert result.total == 2

    def test_empty_required_skills(self):
        result = compare_skills(["Python"], [])
        assert result.missing == []
        assert result.total == 0
        assert result.match_percentage == 0

    def test_none_inputs(self):
        result = compare_skills(None, None)
        assert result.total == 0
        assert result.missing == []

    def test_rounds_half_up(self):
        # one partial out of four -> 12.5%
        result = compare_skills(["React"], ["React Native", "Rust", "Kafka", "Scala"])
        assert result.partial == ["React Native"]
        assert result.match_percentage == 13

    def test_preserves_required_order(self):
        required = ["AWS", "Python", "React Native", "Haskell", "Postgres"]
        result = compare_skills(["py", "React", "PostgreSQL"], required)
        assert result.matched == ["Python", "Postgres"]
        assert result.partial == ["React Native"]
        assert result.missing == ["AWS", "Haskell"]

    def test_every_required_skill_in_exactly_one_bucket(self):
        candidate = ["Go", "k8s", "React", "Vue.js", "Sass"]
        required = ["Golang", "Kubernetes", "React Native", "SCSS", "Django", "Google Cloud", "Go"]
        result = compare_skills(candidate, required)
        buckets = result.matched + result.partial + result.missing
        assert sorted(buckets) == sorted(required)
        assert len(result.matched) + len(result.partial) + len(result.missing) == result.total

    def test_short_token_partial_false_positive(self):
        # Known trade-off: "go" is a substring of "mongodb"
        result = compare_skills(["Go"], ["MongoDB"])
        assert result.partial == ["MongoDB"]
