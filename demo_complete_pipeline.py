#!/usr/bin/env python3
"""
Complete Pipeline Demo: Question Bank → Validation → Instructions → Outline

Shows the full workflow:
1. Load a question bank (CSV directory given on the command line, or the
   built-in example bank)
2. Dry run: validate and report statistics
3. Compile the instruction stream
4. Render an outline of the form
5. Generate the form with an in-memory builder
"""

import logging
import sys

from qbank.backends import OutlineMode, generate_outline
from qbank.compiler import compile_question_bank, read_form_meta
from qbank.examples import RecordingFormBuilder, build_example_bank
from qbank.serialization import result_to_json
from qbank.service import generate_form
from qbank.tables import load_question_bank_dir

logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')


def main():
    print("=" * 80)
    print("COMPLETE PIPELINE DEMO: Question Bank → Validation → Form")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Load question bank
    # =========================================================================
    print("\n1. LOADING QUESTION BANK...")
    if len(sys.argv) > 1:
        bank = load_question_bank_dir(sys.argv[1])
    else:
        bank = build_example_bank()
    meta = read_form_meta(bank.meta_rows)
    print(f"   ✓ Form: {meta.title}")
    print(f"   ✓ Respondent rows: {len(bank.respondent_rows)}")
    print(f"   ✓ Question rows: {len(bank.question_rows)}")

    # =========================================================================
    # STEP 2: Dry run
    # =========================================================================
    print("\n2. VALIDATING (DRY RUN)...")
    result = generate_form(bank, dry_run=True)
    print(f"   {result.message}")
    if result.stats and result.stats.errors:
        print(f"\n   Validation errors ({len(result.stats.errors)}):")
        for error in result.stats.errors:
            print(f"      - {error}")
    if not result.ok:
        return 1

    # =========================================================================
    # STEP 3: Compile
    # =========================================================================
    print("\n3. COMPILING...")
    instructions, stats = compile_question_bank(bank.meta_rows, bank.respondent_rows, bank.question_rows)
    print(f"   ✓ Instructions: {len(instructions)}")

    # =========================================================================
    # STEP 4: Outline
    # =========================================================================
    print("\n4. FORM OUTLINE:")
    print("-" * 80)
    for line in generate_outline(meta, instructions, mode=OutlineMode.DETAILED).split('\n'):
        print(f"   {line}")

    # =========================================================================
    # STEP 5: Generate
    # =========================================================================
    print("\n5. GENERATING FORM...")
    result = generate_form(bank, builder=RecordingFormBuilder(form_id="demo-form"))
    print(f"   {result_to_json(result)}")

    print("\n" + "=" * 80)
    print("PIPELINE COMPLETE!")
    print("=" * 80)
    return 0


if __name__ == "__main__":
    sys.exit(main())
