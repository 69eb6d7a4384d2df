"""Configuration management for nativebindgen."""

import os
import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

_TRUE_VALUES = ("true", "1", "yes")


def _split_paths(value: str) -> list[Path]:
    return [Path(part) for part in value.split(os.pathsep) if part.strip()]


@dataclass
class Config:
    """Run configuration for one header extraction."""

    header_path: Path
    output_file: Path = Path("clang-c.json")
    include_paths: list[Path] = field(default_factory=list)
    extra_args: list[str] = field(default_factory=list)
    verbose: bool = False
    echo_stdout: bool = True
    log_dir: Path | None = Path("logs")
    libclang_path: Path | None = None

    @classmethod
    def from_env(cls, env_path: Optional[Path] = None) -> "Config":
        """
        Load configuration from environment variables or .env file.

        Args:
            env_path: Optional path to .env file (defaults to .env in current directory)

        Returns:
            Config object
        """
        if env_path is None:
            env_path = Path.cwd() / ".env"

        if env_path.exists():
            load_dotenv(env_path)

        libclang_path = os.getenv("LIBCLANG_PATH", "")

        return cls(
            header_path=Path(os.getenv("HEADER_PATH", "test.h")),
            output_file=Path(os.getenv("OUTPUT_FILE", "clang-c.json")),
            include_paths=_split_paths(os.getenv("INCLUDE_PATHS", "")),
            extra_args=shlex.split(os.getenv("CLANG_ARGS", "")),
            verbose=os.getenv("VERBOSE", "false").lower() in _TRUE_VALUES,
            echo_stdout=os.getenv("ECHO_STDOUT", "true").lower() in _TRUE_VALUES,
            libclang_path=Path(libclang_path) if libclang_path else None,
        )

    @classmethod
    def from_args(
        cls,
        header_path: Optional[Path] = None,
        output_file: Optional[Path] = None,
        include_paths: Optional[list[Path]] = None,
        extra_args: Optional[list[str]] = None,
        verbose: Optional[bool] = None,
        echo_stdout: Optional[bool] = None,
    ) -> "Config":
        """
        Create configuration from explicit arguments, falling back to environment.

        Include paths and extra arguments given on the command line are appended
        to the ones coming from the environment.

        Returns:
            Config object
        """
        config = cls.from_env()

        if header_path is not None:
            config.header_path = header_path
        if output_file is not None:
            config.output_file = output_file
        if include_paths:
            config.include_paths.extend(include_paths)
        if extra_args:
            config.extra_args.extend(extra_args)
        if verbose is not None:
            config.verbose = verbose
        if echo_stdout is not None:
            config.echo_stdout = echo_stdout

        return config

    def validate(self) -> None:
        """
        Validate the configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        if not self.header_path.exists():
            raise ValueError(f"Header file not found: {self.header_path}")

        if not self.header_path.is_file():
            raise ValueError(f"Not a file: {self.header_path}")

        for include_path in self.include_paths:
            if not include_path.is_dir():
                raise ValueError(f"Include path is not a directory: {include_path}")

        if self.libclang_path is not None and not self.libclang_path.is_file():
            raise ValueError(f"libclang library not found: {self.libclang_path}")

    def clang_args(self) -> list[str]:
        """Compiler arguments handed to the front-end: -I flags then extra args."""
        return [f"-I{path}" for path in self.include_paths] + list(self.extra_args)

    def ensure_output_dir(self) -> None:
        """Create the directory holding the output file if it doesn't exist."""
        self.output_file.parent.mkdir(parents=True, exist_ok=True)
