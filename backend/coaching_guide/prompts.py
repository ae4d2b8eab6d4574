"""Prompt text sent to the generation model."""
from __future__ import annotations

from string import Template

REQUIRED_SECTIONS: tuple[str, ...] = (
    "Conversation Summary",
    "Great Moments",
    "Growth Opportunities",
    "Coaching Scorecard",
    "Action Plan",
)

SYSTEM_PROMPT = """You are an experienced communication coach who reviews recorded conversations."""

GUIDE_PROMPT_TEMPLATE = """
Review the conversation transcript below and write a coaching guide for the
person being coached. Use markdown with the exact structure described here.

# Coaching Guide

## Conversation Summary
Two or three sentences about the purpose and outcome of the conversation.

## Great Moments
For each strong moment add a level 3 heading, then the quote in bold with a
star emoji, then the timestamp and the reason in italics, for example:
### Showing empathy
**🌟 "I can see why that was frustrating"**
*[01:02] - because it acknowledged the customer's feelings*

## Growth Opportunities
The same format as above, but explain what could be said instead.

## Coaching Scorecard
A markdown table with a header row, a separator row and one row per skill:
| Skill | Score | Comment |
|-------|-------|---------|
| Active listening | 4/5 | Short comment |

## Action Plan
Three concrete steps for the next conversation, one paragraph each.

Do not wrap the answer in a code block and do not add anything before the
first heading.

Transcript:
$transcript
"""


def build_guide_prompt(transcript: str, template: str | None = None) -> str:
    """Insert the transcript into the guide prompt template."""

    prompt = Template(template or GUIDE_PROMPT_TEMPLATE)
    return prompt.safe_substitute(transcript=transcript.strip()).strip()


__all__ = ["GUIDE_PROMPT_TEMPLATE", "REQUIRED_SECTIONS", "SYSTEM_PROMPT", "build_guide_prompt"]
