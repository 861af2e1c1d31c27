from __future__ import annotations

import argparse

from intakescore.cli import score_batch
from intakescore.cli import score_form


def _cmd_score(args: argparse.Namespace) -> None:
    score_form.run(form_path=args.form, out_path=args.out)


def _cmd_map(args: argparse.Namespace) -> None:
    score_form.run_mapping(form_path=args.form)


def _cmd_batch(args: argparse.Namespace) -> None:
    score_batch.run(batch_path=args.file, out_dir=args.out_dir)


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(prog="intakescore")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_score = sub.add_parser("score", help="Score one intake form (YAML or JSON)")
    p_score.add_argument("form")
    p_score.add_argument("--out", default=None, help="Also write the result JSON here")
    p_score.set_defaults(func=_cmd_score)

    p_map = sub.add_parser("map", help="Derive the care mapping for one intake form")
    p_map.add_argument("form")
    p_map.set_defaults(func=_cmd_map)

    p_batch = sub.add_parser("batch", help="Score every form in a batch file, write results.json")
    p_batch.add_argument("file")
    p_batch.add_argument("--out-dir", default="out")
    p_batch.set_defaults(func=_cmd_batch)

    args = p.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
