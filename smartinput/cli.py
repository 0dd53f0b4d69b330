from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from importlib import metadata
from typing import Any, Dict, List

from pydantic import BaseModel
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .chain import FormatterChain, simulate_typing
from .config import load_fields_config
from .errors import SmartInputError
from .presets import build_preset, canonical_name, list_presets, preset_defaults
from .schema import ApplyResult, EditValueModel, FormatterModel, NamesList, TypeResult
from .validators import list_validators
from .value import EditValue

_LOG = logging.getLogger("smartinput")
_yaml = YAML(typ="safe")


def _version() -> str:
    try:
        return metadata.version("smart-input")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def _emit(model: BaseModel, *, by_alias: bool = True) -> None:
    """Writes a response model as compact JSON, non-ASCII text kept as is."""
    payload = model.model_dump(mode="json", by_alias=by_alias)
    sys.stdout.write(json.dumps(payload, ensure_ascii=False))


def _setup_logging(debug: bool) -> None:
    level = logging.DEBUG if debug or os.environ.get("SMARTINPUT_DEBUG") else logging.WARNING
    _LOG.setLevel(level)
    if _LOG.handlers:
        return
    h = logging.StreamHandler()
    h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    _LOG.addHandler(h)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="smartinput",
        description="Keystroke formatters for form fields",
        add_help=True,
    )
    p.add_argument("-v", "--version", action="version", version=f"%(prog)s {_version()}")
    p.add_argument("--debug", action="store_true", help="log every rejection/rewrite to stderr")
    sub = p.add_subparsers(dest="cmd", required=True)

    def add_opts(sp: argparse.ArgumentParser) -> None:
        sp.add_argument(
            "--opt",
            action="append",
            metavar="KEY=VALUE",
            help="preset option, VALUE in YAML syntax (e.g. max_length=10, start_digits=[5])",
        )

    sp_list = sub.add_parser("list", help="List entities (JSON)")
    sp_list.add_argument("what", choices=["presets", "validators"], help="what to list")

    sp_apply = sub.add_parser("apply", help="Run one edit through a preset (JSON)")
    sp_apply.add_argument("preset", help="preset name (snake_case or camelCase)")
    sp_apply.add_argument("--old", default="", help="text before the keystroke")
    sp_apply.add_argument("--new", required=True, help="text the field would show unformatted")
    sp_apply.add_argument("--old-caret", type=int, default=None, help="caret in --old (default: end)")
    sp_apply.add_argument("--new-caret", type=int, default=None, help="caret in --new (default: end)")
    add_opts(sp_apply)

    sp_type = sub.add_parser("type", help="Type TEXT into a preset one character at a time (JSON)")
    sp_type.add_argument("preset", help="preset name")
    sp_type.add_argument("text", help="characters to type")
    add_opts(sp_type)

    sp_check = sub.add_parser("check", help="Type TEXT into a configured field and validate it (JSON)")
    sp_check.add_argument("config", help="path to the fields YAML file")
    sp_check.add_argument("field", help="field name from the config")
    sp_check.add_argument("text", help="characters to type")

    return p


def _parse_opts(items: List[str] | None) -> Dict[str, Any]:
    """Parses KEY=VALUE pairs; VALUE is read as a YAML scalar or flow collection."""
    result: Dict[str, Any] = {}
    for item in items or []:
        if "=" not in item:
            raise ValueError(f"Invalid option '{item}'. Expected 'key=value'")
        key, raw = item.split("=", 1)
        try:
            value = _yaml.load(raw) if raw.strip() else None
        except YAMLError as e:
            raise ValueError(f"Invalid value for option '{key}': {e}") from e
        result[key.strip()] = value
    return result


def _value(text: str, caret: int | None) -> EditValue:
    return EditValue.at_end(text) if caret is None else EditValue.collapsed(text, caret)


def _formatters(chain: FormatterChain) -> List[FormatterModel]:
    return [FormatterModel(name=f.name, params=f.describe()) for f in chain]


def _run_apply(ns: argparse.Namespace) -> ApplyResult:
    chain = build_preset(ns.preset, **_parse_opts(ns.opt))
    old = _value(ns.old, ns.old_caret)
    candidate = _value(ns.new, ns.new_caret)
    result = chain.apply(old, candidate)
    return ApplyResult(
        preset=canonical_name(ns.preset),
        formatters=_formatters(chain),
        old=EditValueModel.of(old),
        candidate=EditValueModel.of(candidate),
        result=EditValueModel.of(result),
        rejected=result == old and candidate != old,
        rewritten=result != candidate and result != old,
    )


def main(argv: list[str] | None = None) -> int:
    ns = _build_parser().parse_args(argv)
    _setup_logging(bool(ns.debug))

    try:
        if ns.cmd == "list":
            data: NamesList
            if ns.what == "presets":
                names = list_presets()
                data = NamesList(names=names, defaults={n: preset_defaults(n) for n in names})
            elif ns.what == "validators":
                data = NamesList(names=list_validators())
            else:
                raise ValueError(f"Unknown list target: {ns.what}")
            _emit(data, by_alias=False)
            return 0

        if ns.cmd == "apply":
            result = _run_apply(ns)
            _emit(result)
            return 0

        if ns.cmd == "type":
            chain = build_preset(ns.preset, **_parse_opts(ns.opt))
            value = simulate_typing(chain, ns.text)
            out = TypeResult(name=canonical_name(ns.preset), keystrokes=len(ns.text),
                             result=EditValueModel.of(value))
            _emit(out)
            return 0

        if ns.cmd == "check":
            fld = load_fields_config(ns.config).build(ns.field)
            value = fld.type_text(ns.text)
            out = TypeResult(name=fld.name, keystrokes=len(ns.text),
                             result=EditValueModel.of(value), error=fld.validate(value.text))
            _emit(out)
            return 0 if out.error is None else 1

    except SmartInputError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2
    except ValueError as e:
        sys.stderr.write(str(e).rstrip() + "\n")
        return 2

    return 2


if __name__ == "__main__":
    raise SystemExit(main())
