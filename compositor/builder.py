"""Build the composite tree from plain text and rebuild parts of it.

The split is purely structural: blank lines separate paragraphs, the
characters in ``EditorConstants.SENTENCE_TERMINATORS`` separate sentences
(the terminators themselves are not kept), whitespace separates words, and
every character of a word becomes a Letter.
"""

import re
from typing import List

from .constants import EditorConstants
from .tracing import trace
from .traversal import words
from .units import Paragraph, Root, Sentence, Word

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_SENTENCE_BREAK = re.compile("[" + re.escape(EditorConstants.SENTENCE_TERMINATORS) + "]")


def split_paragraphs(text: str) -> List[str]:
    return _PARAGRAPH_BREAK.split(text)


def split_sentences(paragraph: str) -> List[str]:
    return _SENTENCE_BREAK.split(paragraph)


def build_word(value: str) -> Word:
    return Word(value)


def build_sentence(span: str) -> Sentence:
    sentence = Sentence()
    for token in span.split():
        sentence.add(build_word(token))
    return sentence


def build_paragraph(span: str) -> Paragraph:
    paragraph = Paragraph()
    for sentence_span in split_sentences(span):
        sentence = build_sentence(sentence_span)
        if sentence.children:
            paragraph.add(sentence)
    return paragraph


def build(text: str) -> Root:
    """Split ``text`` into a fresh tree.

    Spans that end up empty (no words in a sentence, no sentences in a
    paragraph) are dropped, so text without any words yields a Root with
    no children.
    """
    root = Root()
    for paragraph_span in split_paragraphs(text or ""):
        paragraph = build_paragraph(paragraph_span)
        if paragraph.children:
            root.add(paragraph)
    trace("build", root_id=root.id, paragraphs=len(root.children))
    return root


def rebuild_word(word: Word, new_text: str) -> Word:
    """Replace the letters of ``word`` with the characters of ``new_text``.

    The word keeps its id and its position in its sentence, so ancestors
    are untouched.
    """
    word.set_text(new_text)
    trace("rebuild_word", word_id=word.id, text=new_text)
    return word


def replace_text(root: Root, old: str, new: str, ignore_case: bool = False) -> int:
    """Replace ``old`` with ``new`` inside every word under ``root``.

    Matching is per word; a pattern never spans a word boundary. Changed
    words are rebuilt in place.

    Returns:
        Number of words that changed.
    """
    if not old:
        return 0
    pattern = re.compile(re.escape(old), re.IGNORECASE if ignore_case else 0)
    changed = 0
    for word in list(words(root)):
        current = word.text()
        replaced = pattern.sub(lambda _match: new, current)
        if replaced != current:
            rebuild_word(word, replaced)
            changed += 1
    trace("replace_text", old=old, new=new, changed=changed)
    return changed
