import logging
import multiprocessing
from functools import partial
from typing import *

from wordbag_config import CORPUS_PROCESSES
from Wordbag import Discard, Mapper, Wordbag

logger = logging.getLogger(__name__)


def extract(text: str, mapper: Optional[Mapper] = None, discard: Optional[Discard] = None) -> Wordbag:
    document = Wordbag()
    document.textract(text, mapper, discard)
    return document


class Corpus:
    def __init__(self, mapper: Optional[Mapper] = None, discard: Optional[Discard] = None,
                 processes: int = CORPUS_PROCESSES):
        self.mapper = mapper
        self.discard = discard
        self.processes: int = processes
        self.terms = Wordbag()
        self.occurrences = Wordbag()  # documents containing each word
        self.documents: int = 0

    def add_document(self, text: str):
        self.fold(extract(text, self.mapper, self.discard))

    def add_documents(self, texts: Iterable[str]):
        texts = list(texts)
        extractor = partial(extract, mapper=self.mapper, discard=self.discard)
        if self.processes > 1 and len(texts) > 1:
            logger.debug("extracting %d documents with %d processes", len(texts), self.processes)
            with multiprocessing.Pool(self.processes) as pool:
                bags: List[Wordbag] = pool.map(extractor, texts)
        else:
            bags = list(map(extractor, texts))
        # accumulators are only ever touched here, one bag at a time
        for bag in bags:
            self.fold(bag)
        logger.debug("corpus now holds %d documents, %d distinct words", self.documents, self.terms.total_words())

    def fold(self, document: Wordbag):
        self.terms.merge(document)
        self.occurrences.occurrences_add(document)
        self.documents += 1

    def tf(self, word: str) -> float:
        return self.terms.tf(word)

    def idf(self, word: str) -> float:
        return self.occurrences.idf(word)

    def chi2(self, document: Wordbag) -> float:
        return document.chi2(self.terms)

    def clear(self):
        self.terms.clear()
        self.occurrences.clear()
        self.documents = 0
