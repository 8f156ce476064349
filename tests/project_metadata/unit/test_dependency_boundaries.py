"""Boundary tests for the schema learning core."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_learning_core_does_not_import_adapters() -> None:
    package_dir = _project_root() / "src" / "schema_learner"
    core_modules = [
        *sorted((package_dir / "naming").glob("*.py")),
        *sorted((package_dir / "schema_management").glob("*.py")),
        *sorted((package_dir / "model_emission").glob("*.py")),
    ]
    forbidden_import_fragments = (
        "schema_learner.schema_storage",
        "schema_learner.model_rendering",
        "schema_learner.sample_ingestion",
        "schema_learner.configuration",
        "confluent_kafka",
        "openpyxl",
    )

    assert core_modules
    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
