"""Shared pytest fixtures for the full exewhich test suite."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Iterator

import pytest
from loguru import logger

ProgramFactory = Callable[..., Path]


@pytest.fixture(autouse=True)
def _reset_loguru_handlers() -> Iterator[None]:
    """Drop trace handlers installed by a test so sinks do not outlive it."""

    yield
    logger.remove()


@pytest.fixture
def make_program() -> ProgramFactory:
    """Provide a factory that writes a small script file with the given mode."""

    def _make_program(directory: Path, name: str, mode: int = 0o755) -> Path:
        """Create `directory/name` with `mode` and return its path."""

        directory.mkdir(parents=True, exist_ok=True)
        program = directory / name
        program.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
        program.chmod(mode)
        return program

    return _make_program


@pytest.fixture
def host_program(
    monkeypatch: pytest.MonkeyPatch, make_program: ProgramFactory
) -> Callable[[Path, str], Path]:
    """Provide a factory that creates a program runnable under host lookup rules."""

    def _host_program(directory: Path, name: str) -> Path:
        """Create an executable named for the host platform and return its path."""

        if os.name == "nt":
            monkeypatch.setenv("PATHEXT", ".EXE;.BAT;.CMD")
            return make_program(directory, f"{name}.bat")
        return make_program(directory, name)

    return _host_program
