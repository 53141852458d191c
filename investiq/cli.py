#!/usr/bin/env python3
# PURPOSE: Command-line onboarding for the InvestIQ advisor.
# CONTEXT: Walks the questionnaire locally, then hands the answers to the Agent
#          exactly as the Lambda handler would, so results match the deployed path.

import argparse
import json
import sys
from typing import Callable, List, Optional

from investiq.agent import Agent, default_generator
from investiq.model_interface.types import ONBOARDING_STEPS

QUESTIONS = {
    "age": "Age",
    "income": "Annual income (below-25k, 25k-50k, 50k-100k, above-100k)",
    "investmentExperience": "Investment experience (beginner, intermediate, experienced)",
    "riskTolerance": "Risk tolerance (conservative, moderate, aggressive)",
    "investmentGoals": "Investment goals",
    "timeHorizon": "Time horizon (short, medium, long)",
    "monthlyInvestment": "Monthly investment amount",
    "currentInvestments": "Current investments",
    "financialConcerns": "Financial concerns",
}


def ask_questions(input_fn: Callable[[str], str] = input) -> dict:
    """
    Collect answers step by step; blank answers are left out.

    returns:
    - dict – camelCase answers keyed like the onboarding form.
    """
    answers = {}
    for number, step in enumerate(ONBOARDING_STEPS, start=1):
        for name in step:
            text = input_fn(f"[{number}/{len(ONBOARDING_STEPS)}] {QUESTIONS[name]}: ").strip()
            if text:
                answers[name] = text
    return answers


def build_payload(args: argparse.Namespace, answers: Optional[dict]) -> dict:
    payload = {}
    if args.user_id:
        payload["user_id"] = args.user_id
    if answers is not None:
        payload["profile"] = answers
    options = {"narrate": not args.no_narrative}
    if args.skip:
        options["fill_defaults"] = True
    payload["options"] = options
    return payload


def main(argv: Optional[List[str]] = None, input_fn: Callable[[str], str] = input, agent: Optional[Agent] = None) -> int:
    parser = argparse.ArgumentParser(prog="investiq-cli", description="InvestIQ onboarding and advice.")
    parser.add_argument("--user-id", help="save the profile under this id (or load it with --load)")
    parser.add_argument("--load", action="store_true", help="skip the questions and load the saved profile")
    parser.add_argument("--skip", action="store_true", help="fill unanswered questions with defaults")
    parser.add_argument("--no-narrative", action="store_true", help="do not ask the text model for an analysis")
    args = parser.parse_args(argv)

    if args.load and not args.user_id:
        parser.error("--load needs --user-id")

    print("InvestIQ: answer each question and press Enter (blank to skip). Ctrl+C to exit.")
    try:
        answers = None if args.load else ask_questions(input_fn)
    except (EOFError, KeyboardInterrupt):
        print("\nBye!")
        return 0

    agent = agent or Agent(generator=default_generator())
    out = agent.handle(build_payload(args, answers))
    print(json.dumps(out, indent=2))
    return 0 if out.get("status") in ("ok", "incomplete", "not_found") else 1


if __name__ == "__main__":
    sys.exit(main())
