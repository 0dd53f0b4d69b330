from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional

from ..chain import FormatterChain, simulate_typing
from ..errors import ConfigLoadError
from ..presets import build_preset
from ..validators import Validator, build_validator
from ..value import EditValue


# --- helpers ---------------------------------------------------------------
def _assert_only_keys(d: Dict[str, Any] | None, allowed: Iterable[str], *, ctx: str) -> None:
    if d is None:
        return
    allowed_set = set(allowed)
    extra = set(d.keys()) - allowed_set
    if extra:
        raise ConfigLoadError(f"{ctx}: unknown key(s): {', '.join(sorted(extra))}")


def _options(raw: Any, *, ctx: str) -> Dict[str, Any]:
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigLoadError(f"{ctx}.options must be a mapping, got {type(raw).__name__}")
    for k in raw:
        if not isinstance(k, str):
            raise ConfigLoadError(f"{ctx}.options: keys must be strings, got {k!r}")
    return dict(raw)


@dataclass
class ValidatorCfg:
    """Submit-time validator of a field: `kind` + factory options."""
    kind: str
    options: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def from_dict(d: Any, *, ctx: str = "validator") -> ValidatorCfg:
        if isinstance(d, str):
            # short form: `validator: email`
            return ValidatorCfg(kind=d)
        if not isinstance(d, dict):
            raise ConfigLoadError(f"{ctx} must be a string or a mapping")
        _assert_only_keys(d, ["kind", "options"], ctx=ctx)
        kind = d.get("kind")
        if not isinstance(kind, str) or not kind:
            raise ConfigLoadError(f"{ctx}.kind must be a non-empty string")
        return ValidatorCfg(kind=kind, options=_options(d.get("options"), ctx=ctx))


@dataclass
class FieldCfg:
    """
    One form field:
      • preset: name of a formatter preset (snake_case or camelCase);
      • options: preset tuning parameters;
      • validator: optional submit-time validator.
    """
    preset: str
    options: Dict[str, Any] = field(default_factory=dict)
    validator: Optional[ValidatorCfg] = None

    @staticmethod
    def from_dict(d: Any, *, ctx: str = "field") -> FieldCfg:
        if isinstance(d, str):
            # short form: `phone: mobile`
            return FieldCfg(preset=d)
        if not isinstance(d, dict):
            raise ConfigLoadError(f"{ctx} must be a preset name or a mapping")
        _assert_only_keys(d, ["preset", "options", "validator"], ctx=ctx)
        preset = d.get("preset")
        if not isinstance(preset, str) or not preset:
            raise ConfigLoadError(f"{ctx}.preset must be a non-empty string")
        validator_raw = d.get("validator")
        return FieldCfg(
            preset=preset,
            options=_options(d.get("options"), ctx=ctx),
            validator=ValidatorCfg.from_dict(validator_raw, ctx=f"{ctx}.validator")
            if validator_raw is not None else None,
        )


@dataclass
class FieldsConfig:
    fields: Dict[str, FieldCfg] = field(default_factory=dict)

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> FieldsConfig:
        if not d:
            return FieldsConfig()
        _assert_only_keys(d, ["fields"], ctx="config")
        raw_fields = d.get("fields") or {}
        if not isinstance(raw_fields, dict):
            raise ConfigLoadError("config.fields must be a mapping")
        return FieldsConfig(fields={
            str(name): FieldCfg.from_dict(body, ctx=f"fields.{name}")
            for name, body in raw_fields.items()
        })

    def build(self, name: str) -> FieldSpec:
        cfg = self.fields.get(name)
        if cfg is None:
            raise ConfigLoadError(
                f"Unknown field '{name}'. Configured: {', '.join(sorted(self.fields)) or '(none)'}"
            )
        return FieldSpec.from_cfg(name, cfg)


@dataclass(frozen=True)
class FieldSpec:
    """Resolved field: formatter chain plus optional validator."""
    name: str
    chain: FormatterChain
    validator: Optional[Validator] = None

    @staticmethod
    def from_cfg(name: str, cfg: FieldCfg) -> FieldSpec:
        chain = build_preset(cfg.preset, **cfg.options)
        validator = (
            build_validator(cfg.validator.kind, **cfg.validator.options)
            if cfg.validator is not None else None
        )
        return FieldSpec(name=name, chain=chain, validator=validator)

    def type_text(self, keystrokes: Iterable[str], start: EditValue | None = None) -> EditValue:
        return simulate_typing(self.chain, keystrokes, start)

    def validate(self, text: Optional[str]) -> Optional[str]:
        return self.validator(text) if self.validator is not None else None


__all__ = ["ValidatorCfg", "FieldCfg", "FieldsConfig", "FieldSpec"]
