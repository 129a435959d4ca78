import logging
import math
from collections import defaultdict
from operator import itemgetter
from typing import *

from wordbag_config import SEPARATOR

logger = logging.getLogger(__name__)

Mapper = Callable[[str], str]
Discard = Callable[[str], bool]


class HistogramElement(NamedTuple):
    wordcount: int  # words with the same count are grouped together
    num_words: int


class Wordbag:
    def __init__(self):
        self.words: Dict[str, int] = {}
        self.total: int = 0

    def get_words(self) -> Dict[str, int]:
        return self.words

    def add(self, word: str, n: int):
        count = self.words.get(word, 0) + n
        if count < 1:
            self.words.pop(word, None)
        else:
            self.words[word] = count
        self.total += n
        if self.total < 0:
            self.total = 0

    def sub(self, word: str, n: int):
        if word not in self.words:
            return
        self.words[word] -= n
        if self.words[word] < 1:
            del self.words[word]
        # the full requested amount leaves the total, even when the word count was clamped
        self.total -= n
        if self.total < 0:
            logger.debug("total went below zero after removing %d x %r, clamping", n, word)
            self.total = 0

    def once(self, word: str):
        if word not in self.words:
            self.words[word] = 1
            self.total += 1

    def none(self, word: str):
        if word in self.words:
            self.total -= self.words.pop(word)

    def clear(self):
        self.words.clear()
        self.total = 0

    @staticmethod
    def tokens(text: str, mapper: Optional[Mapper] = None, discard: Optional[Discard] = None) -> Iterator[str]:
        for token in text.split(SEPARATOR):
            if discard is not None and discard(token):
                continue
            yield mapper(token) if mapper is not None else token

    def textract(self, text: str, mapper: Optional[Mapper] = None, discard: Optional[Discard] = None):
        for token in self.tokens(text, mapper, discard):
            self.add(token, 1)

    def once_textract(self, text: str, mapper: Optional[Mapper] = None, discard: Optional[Discard] = None):
        for token in self.tokens(text, mapper, discard):
            self.once(token)

    def occurrences_textract(self, text: str, mapper: Optional[Mapper] = None, discard: Optional[Discard] = None):
        document = Wordbag()
        document.once_textract(text, mapper, discard)
        self.occurrences_add(document)

    # other may be self, so every merge walks a snapshot
    def merge(self, other: 'Wordbag'):
        for word, count in list(other.words.items()):
            self.add(word, count)

    def once_merge(self, other: 'Wordbag'):
        for word in list(other.words):
            self.once(word)

    def occurrences_add(self, other: 'Wordbag'):
        for word in list(other.words):
            self.add(word, 1)

    def sub_merge(self, other: 'Wordbag'):
        for word, count in list(other.words.items()):
            self.sub(word, count)

    def total_words(self) -> int:
        return len(self.words)

    def word_count(self, word: str) -> int:
        return self.words.get(word, 0)

    def total_count(self) -> int:
        return self.total

    def tf(self, word: str) -> float:
        count = self.words.get(word)
        if count is None or self.total == 0:
            return 0.0
        return count / self.total

    # meaningful when the bag counts documents per word, see occurrences_add
    def idf(self, word: str) -> float:
        count = self.words.get(word)
        if count is None or count <= 0 or self.total <= 0:
            return 0.0
        return math.log10(self.total / count)

    # corpus should be a count of all terms from all documents
    def chi2(self, corpus: 'Wordbag') -> float:
        chi: float = 0.0
        skipped: int = 0
        for word, observed in self.words.items():
            expected = corpus.tf(word) * self.total
            if expected == 0:
                skipped += 1
                continue
            chi += (observed - expected) ** 2 / expected
        if skipped:
            logger.debug("chi2 skipped %d of %d words missing from corpus", skipped, len(self.words))
        return chi

    def get_histogram(self) -> List[HistogramElement]:
        hist: DefaultDict[int, int] = defaultdict(int)
        for count in self.words.values():
            hist[count] += 1
        return [HistogramElement(wordcount, num_words) for wordcount, num_words in sorted(hist.items())]

    def top(self, n: int = 0) -> List[str]:  # descending
        ranked = sorted(self.words.items(), key=lambda item: (-item[1], item[0]))
        return self._first(ranked, n)

    def last(self, n: int = 0) -> List[str]:  # ascending
        ranked = sorted(self.words.items(), key=lambda item: (item[1], item[0]))
        return self._first(ranked, n)

    @staticmethod
    def _first(ranked: List[Tuple[str, int]], n: int) -> List[str]:
        words = list(map(itemgetter(0), ranked))
        # zero (or less) means all of them
        if n <= 0:
            return words
        return words[:n]

    def __len__(self) -> int:
        return len(self.words)

    def __contains__(self, word: str) -> bool:
        return word in self.words

    def __eq__(self, other) -> bool:
        if not isinstance(other, Wordbag):
            return NotImplemented
        return self.words == other.words

    def __repr__(self) -> str:
        return 'Wordbag(total=%d, words=%d)' % (self.total, len(self.words))
