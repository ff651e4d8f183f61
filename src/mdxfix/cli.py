from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, NoReturn, Optional, Sequence, Tuple

from mdxfix.core.interfaces.logging import LoggerFactoryProtocol
from mdxfix.core.models import PreprocessConfig
from mdxfix.core.report import FixStats
from mdxfix.logging.factory import DefaultLoggerFactory
from mdxfix.logging.helpers import get_logger
from mdxfix.parsing.parser import _build_parser
from mdxfix.preprocessor import Preprocessor, list_default_rules


logger = get_logger('mdxfix')

EXIT_OK = 0
EXIT_CHANGED = 1


def _configure_logging(enable_json: bool, level: int = logging.INFO) -> None:
    """Configure process-wide logging, either JSON or plain text."""
    factory: LoggerFactoryProtocol = DefaultLoggerFactory(json_logs=enable_json, level=level)
    global logger
    logger = factory.get_logger('mdxfix')


def _fatal(msg: str, code: int = 1) -> NoReturn:
    """Exit the process with a logged error."""
    logger.error(msg)
    sys.exit(code)


def _format_rules() -> str:
    lines: List[str] = []
    for desc in list_default_rules():
        flag = '' if desc.default_enabled else ' (opt-in)'
        lines.append(f'{desc.name:<32}{desc.phase.value:<10}{desc.description}{flag}')
    return '\n'.join(lines) + '\n'


def _read_inputs(paths: Sequence[str]) -> List[Tuple[Optional[Path], str]]:
    """Return (path, text) pairs; path is None for standard input."""
    if not paths:
        paths = ['-']
    out: List[Tuple[Optional[Path], str]] = []
    for raw in paths:
        if raw == '-':
            out.append((None, sys.stdin.read()))
            continue
        path = Path(raw)
        if not path.is_file():
            _fatal(f'input file {path} not found')
        out.append((path, path.read_text(encoding='utf-8')))
    return out


@dataclass(frozen=True)
class RunResult:
    text: str
    exit_code: int = EXIT_OK
    wrote_output: bool = False


class MdxFix:
    """Top-level façade for command-style execution."""

    @staticmethod
    def execute(argv: Sequence[str]) -> RunResult:
        """Run the tool and return the output text plus the exit status."""
        ns = _build_parser().parse_args(list(argv))
        json_logs = ns.json_logs or os.getenv('MDXFIX_JSON_LOGS') == '1'
        _configure_logging(json_logs, logging.DEBUG if ns.debug else logging.INFO)

        if ns.list_rules:
            return RunResult(_format_rules())

        if (ns.in_place or ns.check) and (not ns.paths or '-' in ns.paths):
            _fatal('--in-place/--check need file paths, not standard input', code=2)

        totals = FixStats()
        cfg = PreprocessConfig(
            enable=ns.enable,
            disable=ns.disable,
            preserve_code_blocks=ns.preserve_code_blocks,
            on_stats=totals.merge,
            debug=ns.debug,
        )
        pre = Preprocessor(logger=get_logger('preprocessor'))

        outputs: List[str] = []
        changed: List[Path] = []
        for path, text in _read_inputs(ns.paths):
            fixed = pre.preprocess(text, cfg)
            if path is not None and fixed != text:
                changed.append(path)
                if ns.in_place:
                    path.write_text(fixed, encoding='utf-8')
                    logger.info('fixed %s', path)
                elif ns.check:
                    logger.warning('would fix %s', path)
            outputs.append(fixed)

        if ns.stats:
            sys.stderr.write(totals.to_json() + '\n')

        if ns.check:
            return RunResult('', EXIT_CHANGED if changed else EXIT_OK)
        if ns.in_place:
            return RunResult('', wrote_output=bool(changed))

        dump = ''.join(outputs)
        if ns.output:
            Path(ns.output).write_text(dump, encoding='utf-8')
            return RunResult(dump, wrote_output=True)
        return RunResult(dump)

    @staticmethod
    def run(argv: Sequence[str]) -> str:
        """Run the tool with given argv-like sequence and return final text."""
        return MdxFix.execute(argv).text


def main() -> NoReturn:
    """Entry point for the `mdxfix` console script."""
    try:
        result = MdxFix.execute(sys.argv[1:])
        if result.text and not result.wrote_output:
            sys.stdout.write(result.text)
        raise SystemExit(result.exit_code)
    except KeyboardInterrupt:
        logger.error('Interrupted by user.')
        raise SystemExit(130)
    except BrokenPipeError:
        raise SystemExit(0)
    except Exception as exc:
        if os.getenv('DEBUG') == '1':
            raise
        logger.error('Unexpected error: %s', exc)
        raise SystemExit(1)


if __name__ == '__main__':
    main()
