# src/codefrag/cli.py
from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Any, Dict, Optional

from .config import FragmentConfig, load_fragment_config
from .dialects import available
from .emitter import synthesize, write_code_fragment
from .errors import ExitCode, FragmentException, problem_to_dict
from .types import Language

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers: payload printing + config overrides
# =============================================================================

def _print_payload(payload: Dict[str, Any], fmt: str) -> None:
    if fmt == "json":
        print(json.dumps(payload, indent=2, ensure_ascii=False, sort_keys=True, default=str))
    elif fmt == "jsonl":
        print(json.dumps(payload, ensure_ascii=False, sort_keys=True, default=str))
    else:
        # "text": caller prints human-friendly output
        pass


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _load(args: argparse.Namespace) -> FragmentConfig:
    cfg = load_fragment_config(args.config)
    language: Language = Language.parse(args.language) if args.language else cfg.language
    return FragmentConfig(
        language=language,
        attributes=cfg.attributes,
        output_file=getattr(args, "out", None) or cfg.output_file,
        output_directory=getattr(args, "output_dir", None) or cfg.output_directory,
    )


# =============================================================================
# Commands
# =============================================================================

def cmd_generate(args: argparse.Namespace) -> int:
    cfg = _load(args)
    result = write_code_fragment(cfg.attributes, cfg.language, cfg.output_file, cfg.output_directory)

    if args.format in ("json", "jsonl"):
        _print_payload({"ok": True, **result.to_dict()}, args.format)
    else:
        print(f"Wrote {result.language.value} attributes: {result.output_file}")
    return int(ExitCode.OK)


def cmd_preview(args: argparse.Namespace) -> int:
    cfg = _load(args)
    text = synthesize(cfg.attributes, cfg.language)

    if args.format in ("json", "jsonl"):
        _print_payload({"ok": True, "language": cfg.language.value, "source": text}, args.format)
    else:
        sys.stdout.write(text)
    return int(ExitCode.OK)


def cmd_languages(args: argparse.Namespace) -> int:
    langs = sorted(lang.value for lang in available())
    if args.format in ("json", "jsonl"):
        _print_payload({"ok": True, "languages": langs}, args.format)
    else:
        for lang in langs:
            print(lang)
    return int(ExitCode.OK)


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--format", choices=("text", "json", "jsonl"), default="text")
    common.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    parser = argparse.ArgumentParser(
        prog="codefrag",
        description="Generate assembly-level attribute source files for F#, C# or VB.",
    )
    sub = parser.add_subparsers(dest="cmd")

    p_gen = sub.add_parser("generate", parents=[common], help="write the generated source file")
    p_gen.add_argument("--config", required=True, help="YAML/JSON manifest")
    p_gen.add_argument("--language", help="override the manifest language (F#, C#, VB)")
    p_gen.add_argument("--out", help="output file (overrides manifest output_file)")
    p_gen.add_argument("--output-dir", dest="output_dir", help="directory for a relative output file")
    p_gen.set_defaults(func=cmd_generate)

    p_prev = sub.add_parser("preview", parents=[common], help="print the generated source to stdout")
    p_prev.add_argument("--config", required=True, help="YAML/JSON manifest")
    p_prev.add_argument("--language", help="override the manifest language (F#, C#, VB)")
    p_prev.set_defaults(func=cmd_preview)

    p_lang = sub.add_parser("languages", parents=[common], help="list supported languages")
    p_lang.set_defaults(func=cmd_languages)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """
    Entry point used by the console script: `from codefrag.cli import main`.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not getattr(args, "cmd", None):
        parser.print_help()
        return 2

    _configure_logging(args.verbose)

    try:
        return int(args.func(args))
    except FragmentException as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        payload = {"ok": False, "error": problem_to_dict(e.problem), "exit_code": int(e.exit_code)}
        if args.format in ("json", "jsonl"):
            _print_payload(payload, args.format)
        else:
            err = payload["error"]
            print(f"ERROR[{err.get('code', 'CODEFRAG_ERROR')}]: {err.get('message')}", file=sys.stderr)
            if err.get("remediation"):
                print(f"REMEDIATION: {err['remediation']}", file=sys.stderr)
            print(f"DETAILS: {err.get('details', {})}", file=sys.stderr)
        return int(e.exit_code)
    except Exception as e:
        logger.exception("unexpected failure in %s", args.cmd)
        payload = {
            "ok": False,
            "error": {"code": "CODEFRAG_INTERNAL_ERROR", "category": "internal", "message": repr(e)},
            "exit_code": int(ExitCode.INTERNAL_ERROR),
        }
        if args.format in ("json", "jsonl"):
            _print_payload(payload, args.format)
        else:
            print(f"ERROR[CODEFRAG_INTERNAL_ERROR]: {e!r}", file=sys.stderr)
        return int(ExitCode.INTERNAL_ERROR)


if __name__ == "__main__":
    sys.exit(main())
