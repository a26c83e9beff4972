"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml


@dataclass(frozen=True)
class LLMConfig:
    extraction_model: str = "claude-haiku-4-5-20251001"
    generation_model: str = "claude-sonnet-4-5-20250929"
    max_tokens: int = 8192
    temperature: float = 0.3
    timeout: int = 120

    def __post_init__(self) -> None:
        if not 1 <= self.timeout <= 600:
            raise ValueError(f"llm.timeout must be between 1 and 600, got {self.timeout}")
        if not 0.0 <= self.temperature <= 1.0:
            raise ValueError(f"llm.temperature must be between 0 and 1, got {self.temperature}")
        if self.max_tokens < 1:
            raise ValueError(f"llm.max_tokens must be positive, got {self.max_tokens}")


@dataclass(frozen=True)
class ValidationConfig:
    length_ratio: float = 0.9
    name_scan_lines: int = 5

    def __post_init__(self) -> None:
        if not 0.0 < self.length_ratio <= 1.0:
            raise ValueError(
                f"validation.length_ratio must be in (0, 1], got {self.length_ratio}"
            )
        if self.name_scan_lines < 1:
            raise ValueError(
                f"validation.name_scan_lines must be at least 1, got {self.name_scan_lines}"
            )


@dataclass(frozen=True)
class UploadConfig:
    max_bytes: int = 5 * 1024 * 1024

    def __post_init__(self) -> None:
        if self.max_bytes < 1:
            raise ValueError(f"upload.max_bytes must be positive, got {self.max_bytes}")


@dataclass(frozen=True)
class ExportConfig:
    theme: str = "ats"
    title: str = "Resume"


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    upload: UploadConfig = field(default_factory=UploadConfig)
    export: ExportConfig = field(default_factory=ExportConfig)


def _section(cls, raw: dict, name: str):
    values = raw.get(name) or {}
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ValueError(f"Unknown keys in '{name}' config section: {', '.join(unknown)}")
    return cls(**values)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    return AppConfig(
        llm=_section(LLMConfig, raw, "llm"),
        validation=_section(ValidationConfig, raw, "validation"),
        upload=_section(UploadConfig, raw, "upload"),
        export=_section(ExportConfig, raw, "export"),
    )
