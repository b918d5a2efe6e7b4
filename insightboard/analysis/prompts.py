"""Prompt templates shared by every LLM provider."""

from __future__ import annotations

SYSTEM_PROMPT = (
    "You are an expert meeting analyst who extracts actionable items from "
    "transcripts. Always respond with valid JSON."
)

ANALYSIS_PROMPT_TEMPLATE = """\
Analyze the following meeting transcript and extract actionable items. For each action item, determine:
1. The specific task or action to be taken
2. Priority level (LOW, MEDIUM, HIGH) based on urgency and importance
3. Relevant team tags (e.g., @Marketing, @Tech, @Sales, @HR, @Finance, @Legal)

Also provide:
- Overall sentiment of the meeting (POSITIVE, NEUTRAL, NEGATIVE)
- A brief summary of key discussion points

Transcript:
{transcript}

Please respond in the following JSON format:
{{
  "actionItems": [
    {{
      "text": "Specific action item description",
      "priority": "HIGH|MEDIUM|LOW",
      "tags": ["@TeamName", "@AnotherTeam"]
    }}
  ],
  "sentiment": "POSITIVE|NEUTRAL|NEGATIVE",
  "summary": "Brief summary of the meeting"
}}

Guidelines:
- Extract only clear, actionable items (not general discussion points)
- Assign realistic priorities based on business impact and urgency
- Use appropriate team tags based on the nature of the task
- Keep action items concise but specific
- Ensure the summary captures the main outcomes and decisions"""

SUGGESTION_SYSTEM_PROMPT = (
    "You are a productivity assistant that suggests actionable tasks. "
    "Always respond with valid JSON."
)

SUGGESTION_PROMPT_TEMPLATE = """\
Based on the following context, suggest 3-5 relevant action items that might be needed:

Context: {context}

Respond with a JSON array of action items in this format:
[
  {{
    "text": "Specific action item description",
    "priority": "HIGH|MEDIUM|LOW",
    "tags": ["@TeamName"]
  }}
]"""


def build_analysis_prompt(transcript: str) -> str:
    return ANALYSIS_PROMPT_TEMPLATE.format(transcript=transcript)


def build_suggestion_prompt(context: str) -> str:
    return SUGGESTION_PROMPT_TEMPLATE.format(context=context)
