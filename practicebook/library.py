"""A small library catalogue of books that can be added and issued."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Status(Enum):
    """Whether a book is on the shelf or lent out."""

    ISSUED = "ISSUED"
    AVAILABLE = "AVAILABLE"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Book:
    """A catalogued book."""

    accession_number: int
    author: str
    title: str
    status: Status

    def __str__(self) -> str:
        return (
            f"Info -> for book with accession number {self.accession_number}\n"
            f"Title:- {self.title}\n"
            f"Author:- {self.author}\n"
            f"Status:- {self.status}\n"
        )


@dataclass
class Library:
    """A collection of books; issuing a book removes it from the collection."""

    books: list[Book] = field(default_factory=list)

    def add_new_book(self, new_book: Book) -> None:
        """Add a book and announce it."""
        self.books.append(new_book)
        print(f"Added book {new_book}")

    def __len__(self) -> int:
        return len(self.books)

    def issue_book_by_accession_number(self, accession_number: int) -> None:
        """Remove every book carrying ``accession_number``."""
        self.books = [book for book in self.books if book.accession_number != accession_number]

    def __str__(self) -> str:
        entries = "".join(f"{index}: {book}\n" for index, book in enumerate(self.books, start=1))
        return entries + "\n"