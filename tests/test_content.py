from __future__ import annotations

import pytest

from docinsight.content import (
    DocumentCategory,
    TemplateContentSource,
    classify,
    summary_profile,
    synthesize_content,
    synthesize_quick_summary,
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("SE_Unit3.pdf", DocumentCategory.SOFTWARE_ENGINEERING),
        ("unit-SE-notes.docx", DocumentCategory.SOFTWARE_ENGINEERING),
        ("Research_Findings.pdf", DocumentCategory.RESEARCH),
        ("white-paper.txt", DocumentCategory.RESEARCH),
        ("HR Policy 2024.pdf", DocumentCategory.POLICY),
        ("brand_guidelines.md", DocumentCategory.POLICY),
        ("quarterly_report.xlsx", DocumentCategory.GENERAL),
    ],
)
def test_classify_by_name(name, expected):
    assert classify(name) is expected


def test_unit_without_se_is_not_software_engineering():
    assert classify("unit1.pdf") is DocumentCategory.GENERAL


def test_software_engineering_content_mentions_solid():
    content = synthesize_content("SE_Unit3.pdf", "application/pdf")
    assert "SOLID Principles" in content
    assert "Single Responsibility: Every class should have only one reason to change" in content


def test_general_content_names_the_document():
    content = synthesize_content("notes.txt", "text/plain")
    assert content.startswith("Professional Document Analysis: notes.txt")


def test_content_is_idempotent():
    first = synthesize_content("Research_Paper.pdf", "application/pdf")
    second = synthesize_content("Research_Paper.pdf", "application/pdf")
    assert first == second


def test_quick_summary_is_single_sentence():
    for name in ("SE_Unit3.pdf", "research.pdf", "policy.pdf", "misc.txt"):
        summary = synthesize_quick_summary(name, "application/pdf")
        assert summary
        assert summary.count(".") == 1


def test_summary_profile_matches_classification():
    profile = summary_profile("Security Policy.pdf")
    assert "Compliance" in profile.topics
    assert len(profile.key_points) == 4


def test_template_source_delegates():
    source = TemplateContentSource()
    assert source.content("x.txt", "text/plain") == synthesize_content("x.txt", "text/plain")
    assert source.quick_summary("x.txt", "text/plain") == synthesize_quick_summary("x.txt", "text/plain")
