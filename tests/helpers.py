import orjson
import requests

class FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200, url: str = ""):
        self.text = text
        self.status_code = status_code
        self.url = url

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)

class FakeSession:
    """
    Stands in for requests.Session. 'routes' maps a url to either a response body,
    a FakeResponse, or an exception instance to raise.
    """
    def __init__(self, routes: dict | None = None):
        self.routes = routes or {}
        self.headers: dict[str, str] = {}
        self.calls: list[tuple[str, str, dict]] = []

    def request(self, method: str, url: str, **kwargs):
        self.calls.append((method, url, kwargs))
        if url not in self.routes:
            raise requests.exceptions.ConnectionError(f"No route for {url}")
        result = self.routes[url]
        if isinstance(result, BaseException):
            raise result
        if isinstance(result, FakeResponse):
            return result
        return FakeResponse(result, url=url)

def listing_html(*hrefs: str) -> str:
    anchors = "".join(f'<li><a href="{href}" onclick="return false;">Course</a></li>' for href in hrefs)
    return f"<html><body><ul>{anchors}</ul></body></html>"

def detail_html(title: str, *lines: str) -> str:
    body = "<br>".join(lines)
    return (
        "<table><tr><td>"
        "<div><a href='#'>Print</a></div>"
        f"<div><h3>{title}</h3>{body}<br></div>"
        "</td></tr></table>"
    )


def read_json(path):
    with open(path, "rb") as fh:
        return orjson.loads(fh.read())
