"""
Summarizer prompt templates.

Defines the chunk group and merge prompts. The system prompt switches on
content kind and every prompt pins the output language.

Dependencies: langchain_core.prompts
System role: Prompt templates for the LLM summarizer
"""

from langchain_core.prompts import ChatPromptTemplate

from newsdigest.models.enums import ContentKind

TECHNICAL_SYSTEM_PROMPT = """You are an expert technical content summarizer. You must respond in {language} only.
Analyze the provided technical content and provide a summary focusing on main technical concepts, key code examples, and implementation details. {context_info}"""

GENERAL_SYSTEM_PROMPT = """You are an expert content summarizer. You must respond in {language} only.
Analyze the provided content and provide a summary focusing on main points, key information, and important insights. {context_info}"""

GROUP_HUMAN_PROMPT = """{context_info}
Content Type: {content_kind}

Content to Summarize:
{content}

Please provide a summary in {language}:
1. Write a 2-3 sentence summary
2. List 3-5 key points
3. Identify content category in English (Technology, Programming, AI/ML, Web Development, Data Science, etc.)
4. Sentiment analysis (positive/negative/neutral)

Respond in JSON format ONLY (no markdown, no extra text):
{{
  "summary": "Your summary here",
  "keyPoints": ["Point 1", "Point 2", "Point 3"],
  "category": "Category Name in English",
  "sentiment": "positive|negative|neutral"
}}"""

MERGE_SYSTEM_PROMPT = """You are an expert content summarizer. You must respond in {language} only.
You are given multiple partial summaries of an article. Create a cohesive final summary that captures the overall essence of the entire article."""

MERGE_HUMAN_PROMPT = """Article: "{title}"
Content Type: {content_kind}

Partial Summaries:
{partial_summaries}

Combined Key Points:
{key_points}

Please create a final cohesive summary in {language} that captures the overall article:
1. Write a comprehensive 3-4 sentence summary
2. Select and refine the most important 4-6 key points
3. Determine the overall category and sentiment

Respond in JSON format ONLY (no markdown, no extra text):
{{
  "summary": "Your comprehensive summary here",
  "keyPoints": ["Refined point 1", "Refined point 2", "Refined point 3"],
  "category": "Overall Category Name in English",
  "sentiment": "positive|negative|neutral"
}}"""

TECHNICAL_GROUP_PROMPT = ChatPromptTemplate.from_messages([
    ("system", TECHNICAL_SYSTEM_PROMPT),
    ("human", GROUP_HUMAN_PROMPT),
])

GENERAL_GROUP_PROMPT = ChatPromptTemplate.from_messages([
    ("system", GENERAL_SYSTEM_PROMPT),
    ("human", GROUP_HUMAN_PROMPT),
])

MERGE_PROMPT = ChatPromptTemplate.from_messages([
    ("system", MERGE_SYSTEM_PROMPT),
    ("human", MERGE_HUMAN_PROMPT),
])


def get_group_prompt(content_kind: ContentKind) -> ChatPromptTemplate:
    """
    Select the chunk group prompt for a content kind.

    Args:
        content_kind: Kind of the content item being summarized

    Returns:
        ChatPromptTemplate: Technical prompt for CODE, general prompt otherwise
    """
    if content_kind == ContentKind.CODE:
        return TECHNICAL_GROUP_PROMPT
    return GENERAL_GROUP_PROMPT
