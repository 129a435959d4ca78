import logging
from typing import *

from nltk.stem import PorterStemmer

from wordbag_config import STOPWORDS_LANGUAGE

logger = logging.getLogger(__name__)

stemmer = PorterStemmer()


def lowercase(word: str) -> str:
    return word.lower()


def porter_stem(word: str) -> str:
    return stemmer.stem(word)


# repeated spaces leave empty tokens behind
def is_empty(word: str) -> bool:
    return word == ''


class StopwordFilter:
    __slots__ = ['language', 'words']

    def __init__(self, stopwords: Optional[Iterable[str]], language: str):
        self.language: str = language
        self.words: Optional[FrozenSet[str]] = frozenset(w.lower() for w in stopwords) if stopwords is not None else None

    def __call__(self, word: str) -> bool:
        if self.words is None:
            from nltk.corpus import stopwords
            self.words = frozenset(stopwords.words(self.language))
            logger.debug("loaded %d %s stop words from nltk", len(self.words), self.language)
        return word.lower() in self.words


def stopword_filter(stopwords: Optional[Iterable[str]] = None, language: str = STOPWORDS_LANGUAGE) -> StopwordFilter:
    return StopwordFilter(stopwords, language)


class Composed:
    __slots__ = ['mappers']

    def __init__(self, mappers: Sequence[Callable[[str], str]]):
        self.mappers = tuple(mappers)

    def __call__(self, word: str) -> str:
        for mapper in self.mappers:
            word = mapper(word)
        return word


class AnyOf:
    __slots__ = ['predicates']

    def __init__(self, predicates: Sequence[Callable[[str], bool]]):
        self.predicates = tuple(predicates)

    def __call__(self, word: str) -> bool:
        return any(predicate(word) for predicate in self.predicates)


# classes rather than closures so the hooks survive pickling into a Pool
def compose(*mappers: Callable[[str], str]) -> Composed:
    return Composed(mappers)


def any_of(*predicates: Callable[[str], bool]) -> AnyOf:
    return AnyOf(predicates)
