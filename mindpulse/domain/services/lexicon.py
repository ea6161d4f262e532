"""
Keyword lexicons used by the rule-based scorers.

Chinese keywords match anywhere inside a whitespace token, since Chinese
text is written without word separators. Latin-script keywords match a
whole token after case-folding and stripping surrounding punctuation.
"""

import string
from collections.abc import Iterable

# ASCII plus common full-width punctuation
_PUNCTUATION = string.punctuation + "，。！？、；：“”‘’（）《》【】…—·～"


def is_cjk(word: str) -> bool:
    """True when the word contains at least one CJK ideograph."""
    return any("一" <= ch <= "鿿" for ch in word)


def normalize_token(token: str) -> str:
    """Case-fold a token and strip surrounding punctuation."""
    return token.strip(_PUNCTUATION).casefold()


class KeywordSet:
    """An immutable keyword set with script-aware matching."""

    __slots__ = ("name", "_cjk", "_latin")

    def __init__(self, name: str, words: Iterable[str]):
        self.name = name
        words = [w.strip() for w in words if w.strip()]
        self._cjk = tuple(sorted({w for w in words if is_cjk(w)}))
        self._latin = frozenset(w.casefold() for w in words if not is_cjk(w))

    def __contains__(self, word: str) -> bool:
        return word in self._cjk or word.casefold() in self._latin

    def __repr__(self) -> str:
        return f"KeywordSet({self.name!r}, size={len(self._cjk) + len(self._latin)})"

    def matches(self, token: str) -> bool:
        """True when the token contains a CJK keyword or equals a Latin one."""
        if any(word in token for word in self._cjk):
            return True
        return normalize_token(token) in self._latin

    def count(self, text: str) -> int:
        """Number of keyword occurrences in the whole text."""
        hits = sum(text.count(word) for word in self._cjk)
        if self._latin:
            hits += sum(1 for token in text.split() if normalize_token(token) in self._latin)
        return hits


# Stress / anxiety features

STRESS_KEYWORDS = KeywordSet(
    "stress",
    [
        "压力", "紧张", "疲惫", "不堪重负", "焦虑", "烦躁", "压抑", "沮丧", "困扰", "崩溃",
        "stress", "stressed", "stressful", "tense", "exhausted", "overwhelmed",
        "burnout", "burned-out", "frustrated", "irritable", "drained", "pressure",
    ],
)

ANXIETY_KEYWORDS = KeywordSet(
    "anxiety",
    [
        "担心", "害怕", "恐惧", "慌张", "不安", "忧虑", "惊慌", "恐慌", "惶恐", "忐忑", "焦虑",
        "anxious", "anxiety", "worried", "worry", "worrying", "afraid", "scared",
        "fearful", "nervous", "panic", "panicking", "uneasy", "restless",
    ],
)

INTENSIFIERS = KeywordSet(
    "intensifier",
    [
        "非常", "很", "特别", "极其", "太", "真的", "好", "超级",
        "very", "extremely", "really", "so", "super", "incredibly", "too", "terribly",
    ],
)

# Sentiment fallback emotions

JOY_KEYWORDS = KeywordSet(
    "joy",
    [
        "开心", "高兴", "快乐", "幸福", "愉快", "喜悦", "满意", "兴奋", "非常好", "很好", "真好", "希望",
        "happy", "glad", "joy", "joyful", "excited", "great", "wonderful",
        "delighted", "grateful", "hopeful", "love",
    ],
)

CALM_KEYWORDS = KeywordSet(
    "calm",
    [
        "平静", "放松", "轻松", "安心", "平和", "舒服", "踏实", "顺利", "安稳", "从容", "平稳",
        "calm", "relaxed", "peaceful", "content", "rested", "serene", "steady", "smooth",
    ],
)

SADNESS_KEYWORDS = KeywordSet(
    "sadness",
    [
        "难过", "伤心", "悲伤", "失落", "沮丧", "压抑", "孤独", "绝望", "痛苦", "低落", "哭",
        "sad", "unhappy", "lonely", "hopeless", "depressed", "miserable",
        "heartbroken", "crying", "cry",
    ],
)

ANGER_KEYWORDS = KeywordSet(
    "anger",
    [
        "生气", "愤怒", "恼火", "烦躁", "气愤", "讨厌", "暴躁", "火大",
        "angry", "mad", "furious", "annoyed", "irritated", "hate", "resentful",
    ],
)

FEAR_KEYWORDS = KeywordSet(
    "fear",
    [
        "害怕", "恐惧", "惊慌", "恐慌", "惶恐", "可怕",
        "afraid", "scared", "fear", "terrified", "frightened", "fearful",
    ],
)

ANXIETY_EMOTION_KEYWORDS = KeywordSet(
    "anxiety",
    [
        "焦虑", "担心", "不安", "忧虑", "紧张", "慌张", "忐忑",
        "anxious", "anxiety", "worried", "worry", "nervous", "uneasy", "panic",
    ],
)

POSITIVE_EMOTIONS = (JOY_KEYWORDS, CALM_KEYWORDS)
NEGATIVE_EMOTIONS = (SADNESS_KEYWORDS, ANGER_KEYWORDS, FEAR_KEYWORDS, ANXIETY_EMOTION_KEYWORDS)
