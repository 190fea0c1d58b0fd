"""Interval strategy loading.

A strategy decides how far in the future a card at a given level becomes
due. It lives in the data directory as ``strategies/<name>/<name>.py`` and
defines a ``Strategy`` class with ``expiration_date(level, now)``.
"""

import importlib.util
import pathlib


def load_strategy(name: str, leitner_dir: pathlib.Path):
    strategy_path = leitner_dir / "strategies" / name / f"{name}.py"
    if not strategy_path.exists():
        raise FileNotFoundError(f"Strategy not found: {strategy_path}")
    spec = importlib.util.spec_from_file_location(f"leitner_strategy_{name}", str(strategy_path))
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod.Strategy()
