"""
Chapter loading and paragraph search for the book viewer.
"""

import logging
import os

from markupsafe import Markup, escape

logger = logging.getLogger(__name__)

PARAGRAPH_SEPARATOR = "\n\n"


class ChapterNotFound(Exception):
    def __init__(self, number):
        super().__init__(f"Chapter {number} does not exist")
        self.number = number


class Book:
    """A table of contents (``toc.txt``) plus ``chp<N>.txt`` chapter files."""

    def __init__(self, data_folder):
        self.data_folder = data_folder

    def contents(self):
        with open(os.path.join(self.data_folder, "toc.txt"), encoding="utf-8") as f:
            names = [line.rstrip("\n") for line in f]
        # Line N names chp<N>.txt, so only trailing blank lines are dropped.
        while names and not names[-1].strip():
            names.pop()
        return names

    def chapter_text(self, number: int) -> str:
        with open(os.path.join(self.data_folder, f"chp{number}.txt"), encoding="utf-8") as f:
            return f.read()

    def chapter(self, number: int):
        """Return ``(name, text)`` for a 1-based chapter number."""
        contents = self.contents()
        if not 1 <= number <= len(contents):
            raise ChapterNotFound(number)
        return contents[number - 1], self.chapter_text(number)

    def chapters(self):
        for number, name in enumerate(self.contents(), start=1):
            yield name, self.chapter_text(number)


def paragraphs(text: str):
    return text.split(PARAGRAPH_SEPARATOR)


def search_paragraphs(term: str, text: str):
    """Return ``(paragraph, index)`` pairs of every paragraph containing term."""
    return [
        (paragraph, index)
        for index, paragraph in enumerate(paragraphs(text))
        if term in paragraph
    ]


def search(term, chapters):
    """Search ``(name, text)`` chapters for a literal, case-sensitive term.

    Returns ``(chapter_name, chapter_number, matches)`` for every chapter
    containing the term, numbered from 1 in the order given.
    """
    if not term:
        return []

    results = []
    for number, (name, text) in enumerate(chapters, start=1):
        if term in text:
            results.append((name, number, search_paragraphs(term, text)))
    logger.debug("Search for %r matched %d chapters", term, len(results))
    return results


def highlight(text: str, term: str) -> Markup:
    """Wrap every literal occurrence of term in ``<strong>``; the rest is escaped."""
    if not term:
        return escape(text)
    emphasised = Markup("<strong>{0}</strong>").format(term)
    return emphasised.join(escape(piece) for piece in text.split(term))


def in_paragraphs(text: str) -> Markup:
    return Markup("").join(
        Markup('<p id="paragraph{0}">{1}</p>').format(index, paragraph)
        for index, paragraph in enumerate(paragraphs(text))
    )
