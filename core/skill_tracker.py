# =============================================================================
# core/skill_tracker.py : Keyword-Based Skill Usage Tracker
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Guesses whether a skill document steered the agent's replies.  Skills
#   are loaded inside the agent framework, so their use cannot be observed
#   directly.  Instead, each new message is scanned for the skill's domain
#   keywords; two or more distinct hits count as one use of the skill.
#
#   This is an approximation.  A terse reply can miss the threshold, and an
#   unrelated reply can cross it.
#
# ONE TRACKER PER SESSION:
#   The tracker holds a cursor into the conversation it has already seen.
#   Two conversations sharing one tracker would move the same cursor, so
#   every session constructs its own SkillTracker.
# =============================================================================

from typing import Any, Iterable, Mapping, Sequence

from core.models import SkillDefinition

MIN_KEYWORD_MATCHES = 2


def count_keyword_matches(content: Any, keywords: Iterable[str]) -> int:
    """Count the distinct keywords contained in ``content`` (case-insensitive).

    ``None`` is treated as the empty string; anything else is passed
    through ``str()`` first.
    """
    text = "" if content is None else str(content).lower()
    distinct = dict.fromkeys(keyword.lower() for keyword in keywords)
    return sum(1 for keyword in distinct if keyword in text)


def _message_content(message: Any) -> Any:
    if isinstance(message, Mapping):
        return message.get("content")
    return getattr(message, "content", None)


def _keywords(definition: Any) -> Sequence[str]:
    if isinstance(definition, SkillDefinition):
        return definition.keywords
    if isinstance(definition, Mapping):
        return definition.get("keywords", ())
    return getattr(definition, "keywords", ())


class SkillTracker:
    """Per-session skill usage counts, updated from conversation messages."""

    def __init__(self):
        self._call_counts: dict[str, int] = {}
        self.last_analyzed_message_count = 0

    def analyze_messages(
        self,
        messages: Sequence[Any],
        skill_definitions: Mapping[str, Any],
    ) -> None:
        """Scan the messages appended since the last call.

        A replayed or shorter conversation is ignored.  Each new message
        records a skill at most once, however many of its keywords match.
        """
        if len(messages) <= self.last_analyzed_message_count:
            return

        new_messages = messages[self.last_analyzed_message_count:]
        self.last_analyzed_message_count = len(messages)

        for message in new_messages:
            content = _message_content(message)
            for skill_name, definition in skill_definitions.items():
                matches = count_keyword_matches(content, _keywords(definition))
                if matches >= MIN_KEYWORD_MATCHES:
                    self.record(skill_name)

    def record(self, skill_name: str) -> None:
        self._call_counts[skill_name] = self._call_counts.get(skill_name, 0) + 1

    def get_count(self, skill_name: str) -> int:
        return self._call_counts.get(skill_name, 0)

    def get_all(self) -> dict[str, int]:
        return dict(self._call_counts)

    def reset(self) -> None:
        """Forget all counts and start the next conversation from message 0."""
        self._call_counts.clear()
        self.last_analyzed_message_count = 0

    def format(self) -> str:
        if not self._call_counts:
            return "  ⚠️  没有检测到 skill 被使用"
        return "\n".join(
            f"  - {skill}: {count} 次" for skill, count in self._call_counts.items()
        )
