"""
LUIS Model Build Runner
=======================

Entry-point script for compiling YAML training files into a LUIS model.

Steps
-----
1. Load `.env` (if present) and the compiler settings.
2. Read and merge the YAML files with the configured conflict policy.
3. Compile the merged document.
4. Write the model as JSON.

Usage
-----
    luis-compile data/*.yml --culture es-es --output models/model.json

Notes
-----
- On any error nothing is written and the process exits with status 1.
- The output file is overwritten if it already exists.
"""

import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from luis_compiler.compiler.errors import ModelCompilationError
from luis_compiler.compiler.model_compiler import ModelCompiler
from luis_compiler.config.env_loader import load_env
from luis_compiler.config.paths import DEFAULT_OUTPUT_PATH
from luis_compiler.config.settings import load_settings
from luis_compiler.document.document_loader import load_document


# --------------------------------------------------
# Argument parsing
# --------------------------------------------------

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="luis-compile",
        description="Compile YAML training files into a LUIS model document.",
    )
    parser.add_argument("files", nargs="+", type=Path, help="YAML training files")
    parser.add_argument("-c", "--culture", help="Target culture (e.g. en-us, es-es)")
    parser.add_argument(
        "-o", "--output", type=Path, default=DEFAULT_OUTPUT_PATH,
        help=f"Output JSON file (default: {DEFAULT_OUTPUT_PATH})",
    )
    parser.add_argument(
        "--conflict-policy", choices=["override", "error"],
        help="How to handle keys defined in more than one file",
    )
    parser.add_argument(
        "--timestamp", action="store_true",
        help="Append the generation time to the model description",
    )
    return parser.parse_args(argv)


# --------------------------------------------------
# Build
# --------------------------------------------------

def build_model(args: argparse.Namespace) -> int:
    """
    Compile the model described by the parsed arguments.

    Returns
    -------
    int
        Process exit status.
    """
    load_env()
    settings = load_settings()

    conflict_policy = args.conflict_policy or settings.conflict_policy
    generated_at = datetime.now(timezone.utc) if args.timestamp else None

    try:
        document = load_document(args.files, conflict_policy=conflict_policy)
        model = ModelCompiler(settings).compile(
            document,
            culture=args.culture,
            generated_at=generated_at,
        )
    except ModelCompilationError as e:
        print(f"Not able to compile language model\nError: {e}", file=sys.stderr)
        return 1

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open("w", encoding="utf-8") as f:
        json.dump(model.to_dict(), f, ensure_ascii=False, indent=2)
        f.write("\n")

    print("=" * 40)
    print("LUIS Model Build Summary")
    print("=" * 40)
    print(f"Culture     : {model.culture}")
    print(f"Intents     : {len(model.intents)}")
    print(f"Entities    : {len(model.entities)}")
    print(f"Features    : {len(model.model_features)}")
    print(f"Utterances  : {len(model.utterances)}")
    print(f"Output      : {args.output}")

    return 0


# --------------------------------------------------
# Entry point
# --------------------------------------------------

def main(argv: Optional[List[str]] = None) -> None:
    """
    Execute the model build pipeline.
    """
    sys.exit(build_model(parse_args(argv)))


if __name__ == "__main__":
    main()
