"""Command line driver: read one schema file and print the generated code."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO, NoReturn

from schematic.core.config import Config, ExitCodesConfig, get_config
from schematic.core.exceptions import RuntimeFault, SchematicError, UsageError
from schematic.core.schemas import Schema
from schematic.generation.interfaces import Generator
from schematic.generation.registry import CallableGenerator, resolve_generator
from schematic.io.schema_loader import SchemaLoader
from schematic.logger import logger, setup_logger


class SchematicCLI:
    """Runs the read, decode, generate, print pipeline.

    Every failure, expected or not, ends the process with one diagnostic line
    on stderr and a non-zero exit status. Nothing is written to stdout unless
    generation succeeds.
    """

    def __init__(
        self,
        generator: Generator | None = None,
        config: Config | None = None,
        stdout: BinaryIO | None = None,
    ) -> None:
        """Initialize the driver.

        Args:
            generator: Code generator to use instead of the configured one
            config: Settings to use instead of the environment
            stdout: Binary stream for generated code, defaults to sys.stdout
        """
        self.generator = generator
        self._config = config
        self._stdout = stdout

    @property
    def config(self) -> Config:
        if self._config is None:
            self._config = get_config()
        return self._config

    def run(self, argv: Sequence[str] | None = None) -> NoReturn:
        """Run the pipeline and exit the process.

        Args:
            argv: Arguments after the program name, defaults to sys.argv[1:]

        Raises:
            SystemExit: Always, with status 0 on success
        """
        setup_logger()
        try:
            path = self.parse_args(sys.argv[1:] if argv is None else argv)
            setup_logger(self.config.log_level)
            self.write(self.generate_for_path(path))
        except SchematicError as e:
            self._fatal(e)
        except Exception as e:
            self._fatal(RuntimeFault(e))
        sys.exit(self.config.exit_codes.success)

    def run_for_testing(self, argv: Sequence[str]) -> bytes:
        """Run the pipeline without the fault barrier.

        Unlike run(), this method raises exceptions instead of calling
        sys.exit() and returns the generated code instead of printing it.

        Returns:
            The generated code
        """
        return self.generate(argv)

    def generate(self, argv: Sequence[str]) -> bytes:
        """Validate arguments, load the schema and generate code for it."""
        return self.generate_for_path(self.parse_args(argv))

    def generate_for_path(self, path: Path) -> bytes:
        schema = self.load_schema(path)
        generator = self.resolve_generator()
        logger.debug("Generating code for %s", path)
        return generator.generate(schema)

    def parse_args(self, argv: Sequence[str]) -> Path:
        if len(argv) != 1:
            raise UsageError()
        return Path(argv[0])

    def load_schema(self, path: Path) -> Schema:
        loader = SchemaLoader(encoding=self.config.encoding)
        return loader.load(path)

    def resolve_generator(self) -> CallableGenerator:
        if self.generator is not None:
            return CallableGenerator(self.generator, self.config.encoding)
        return resolve_generator(self.config.generator, self.config.encoding)

    def write(self, code: bytes) -> None:
        """Write the generated code and a trailing newline to stdout."""
        stream = self._stdout if self._stdout is not None else sys.stdout.buffer
        stream.write(code + b"\n")
        stream.flush()

    def _fatal(self, error: SchematicError) -> NoReturn:
        """Log ``error`` as a single line and exit with its status code."""
        message = " ".join(str(error).splitlines())
        logger.critical(message)
        exit_codes = self._config.exit_codes if self._config else ExitCodesConfig()
        sys.exit(getattr(exit_codes, error.exit_code_name))


def main() -> None:
    """Entry point for the ``schematic`` console script."""
    SchematicCLI().run()
