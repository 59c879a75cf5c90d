"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, coolstore.toml only contains
overrides.  An empty or missing file yields the stock prompt and messages.

Templates are ``str.format`` strings checked at load time against the one
placeholder each is rendered with, so a bad template fails when settings
are read rather than on the first request.
"""

from __future__ import annotations

from typing import Self

from pydantic import BaseModel, Field, field_validator, model_validator


def _check_template(template: str, **placeholders: object) -> None:
    try:
        template.format(**placeholders)
    except (KeyError, IndexError, AttributeError, ValueError) as exc:
        allowed = ", ".join(f"{{{name}}}" for name in placeholders)
        raise ValueError(f"cannot render {template!r} (allowed: {allowed}): {exc!r}") from exc


class ShellConfig(BaseModel):
    """[shell] section."""

    model_config = {"frozen": True}

    quit_token: str = "q"
    prompt: str = "Enter a SKU to add to cart or '{quit_token}' to quit."

    @field_validator("quit_token")
    @classmethod
    def non_empty_token(cls, value: str) -> str:
        if not value:
            raise ValueError("quit_token must not be empty")
        return value

    @model_validator(mode="after")
    def prompt_renders(self) -> Self:
        _check_template(self.prompt, quit_token=self.quit_token)
        return self

    def render_prompt(self) -> str:
        return self.prompt.format(quit_token=self.quit_token)


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    success_template: str = "Successfully added {value} to cart."

    @field_validator("success_template")
    @classmethod
    def template_renders(cls, value: str) -> str:
        _check_template(value, value=1)
        return value


class CoolstoreConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    shell: ShellConfig = Field(default_factory=ShellConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
