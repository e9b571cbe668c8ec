"""Prompt templates and response schemas for text enrichment."""

ANALYZE_MAX_CHARS = 1000

ANALYZE_PROMPT = """Analyze the following content and provide:
1. A short, catchy title (max 6 words)
2. 3-5 relevant lowercase tags
3. A concise summary of 2-5 lines

Content: "{content}"
"""

SUBTASKS_PROMPT = (
    'Break down the following task into 3-5 actionable subtasks. Task: "{task}". '
    "Return only the subtasks as a JSON string array."
)

TASKS_FROM_PROMPT = (
    'Based on the following request, generate a list of 3-7 actionable tasks, '
    'items to buy or places to visit. Request: "{prompt}". '
    "Return only the items as a JSON string array, each item short and concrete."
)

TIP_PROMPT = (
    "Give me a very short, motivating 1-sentence productivity tip based on this "
    "context: {context}"
)

ANALYSIS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "title": {"type": "STRING"},
        "tags": {"type": "ARRAY", "items": {"type": "STRING"}},
        "summary": {"type": "STRING"},
    },
    "required": ["title", "tags", "summary"],
}

STRING_LIST_SCHEMA = {
    "type": "ARRAY",
    "items": {"type": "STRING"},
}
