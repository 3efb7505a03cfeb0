"""CSS selection over fetched markup."""
from bs4 import BeautifulSoup


def select_text(markup: str, selector: str) -> str:
    """Return the text of the first element matching selector, or ''."""
    soup = BeautifulSoup(markup, "html.parser")
    node = soup.select_one(selector)
    if node is None:
        return ""
    return node.get_text()
