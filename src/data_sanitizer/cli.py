from __future__ import annotations
import argparse, json, sys
from pathlib import Path
from typing import Any, List, Optional

from .config_model.model import SanitizerCfg, load_config
from .engine import Sanitizer, sanitize_records
from .errors import SanitizerError
from .policy import build_rules_from_config, merge_rules
from .utils.log import logger_from_cfg

EXIT_RULE_ERROR = 2


def _read_json(path: Optional[str]) -> Any:
    if not path or path == "-":
        return json.load(sys.stdin)
    return json.loads(Path(path).read_text(encoding="utf-8"))


def _write_json(obj: Any, path: Optional[str]) -> None:
    text = json.dumps(obj, ensure_ascii=False, indent=2, default=str)
    if not path or path == "-":
        sys.stdout.write(text + "\n")
    else:
        Path(path).write_text(text + "\n", encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="data-sanitize",
        description="Apply sanitizer rules to a JSON document (or a JSON list of rows).",
    )
    ap.add_argument("--data", default="-", help="input JSON file (default: stdin)")
    ap.add_argument("--rules", help="JSON file mapping attribute paths to rules")
    ap.add_argument("--config", help="TOML config; its [rules] table is applied before --rules")
    ap.add_argument("--out", default="-", help="output JSON file (default: stdout)")
    ap.add_argument("--records", action="store_true", help="input is a list of rows, sanitize each")
    ap.add_argument("--log-level", default=None, help="override [logging].level")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    cfg = load_config(args.config) if args.config else SanitizerCfg()
    log = logger_from_cfg(cfg, "data_sanitizer.cli", stream=sys.stderr, level=args.log_level)

    rules = build_rules_from_config(cfg)
    if args.rules:
        rules = merge_rules(rules, _read_json(args.rules))
    data = _read_json(args.data)

    try:
        if args.records:
            result: Any = sanitize_records(data, rules, cfg=cfg)
        else:
            result = Sanitizer(data, rules, cfg=cfg).sanitize()
    except SanitizerError as e:
        log.error("sanitize failed", extra={"error": type(e).__name__})
        sys.stderr.write(f"data-sanitize: {e}\n")
        return EXIT_RULE_ERROR

    log.info("sanitized", extra={"attributes": len(rules), "records": args.records})
    _write_json(result, args.out)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
