"""
Pytest configuration and shared fixtures.
"""
import pytest

from bs4 import BeautifulSoup


@pytest.fixture
def make_soup():
    """Build a parsed document from an HTML snippet."""
    def _make(html: str) -> BeautifulSoup:
        return BeautifulSoup(html, "html.parser")
    return _make


@pytest.fixture
def team_page(make_soup):
    return make_soup(
        """
        <html><body>
          <span id="lnkTeamName">Team</span><span id="lnkTeamName">X</span>
          <span id="lblPoints">1 000,50</span>
          <span id="lblGames">Games played: 39 999</span>
          <a id="lnkCaptain" href="/UserDetails.aspx?uid=39999">Marks</a>
          <a href="/Teams/TeamDetails.aspx?tid=5">TeamX</a>
        </body></html>
        """
    )
