import pytest

from practicebook.library import Book, Library, Status


@pytest.fixture
def books():
    return (
        Book(1, "Test", "Mild west", Status.AVAILABLE),
        Book(2, "Test2", "Wild west", Status.ISSUED),
    )


@pytest.fixture
def library(books):
    lib = Library()
    for book in books:
        lib.add_new_book(book)
    return lib


def test_book_text(books):
    text = str(books[0])
    assert text.splitlines() == [
        "Info -> for book with accession number 1",
        "Title:- Mild west",
        "Author:- Test",
        "Status:- AVAILABLE",
    ]


def test_add_new_book_announces(capsys, books):
    lib = Library()
    lib.add_new_book(books[1])
    out = capsys.readouterr().out
    assert out.startswith("Added book Info -> for book with accession number 2\n")
    assert "Status:- ISSUED" in out


def test_count(library, books):
    assert len(library) == len(books)


def test_issue_removes_book(library):
    library.issue_book_by_accession_number(1)
    assert len(library) == 1
    assert [book.accession_number for book in library.books] == [2]


def test_issue_unknown_number_keeps_books(library, books):
    library.issue_book_by_accession_number(99)
    assert library.books == list(books)


def test_library_text(library, books):
    text = str(library)
    assert text.startswith("1: Info -> for book with accession number 1\n")
    assert f"2: {books[1]}\n" in text
    assert text.endswith("\n\n\n")


def test_empty_library_text():
    assert str(Library()) == "\n"


def test_status_text():
    issued = Book(3, "Author", "Title", Status.ISSUED)
    available = Book(4, "Author", "Title", Status.AVAILABLE)
    assert str(issued.status) == "ISSUED"
    assert str(available.status) == "AVAILABLE"
    assert str(issued).splitlines()[-1] == "Status:- ISSUED"
    assert str(available).splitlines()[-1] == "Status:- AVAILABLE"