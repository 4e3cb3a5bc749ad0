"""Value-level copies of documents crossing the store boundary"""

from docstore.core.models import Author, Document


def clone_document(doc: Document) -> Document:
    """Return a new Document with the same values and a freshly built Author.

    Strings and datetimes are shared since nothing mutates them.
    """
    author = None
    if doc.author is not None:
        author = Author(id=doc.author.id, name=doc.author.name)
    return Document(
        id=doc.id,
        title=doc.title,
        content=doc.content,
        author=author,
        created=doc.created,
    )
