"""Shared test fixtures and sample feed documents."""

from __future__ import annotations

import pytest

import paddock.api_logging as api_logging
from paddock.exceptions import FeedConnectionError

FEED_URL = "https://api.jolpi.ca/ergast/f1"
ARTICLE_URL = "https://en.wikipedia.org"


SAMPLE_DRIVERS_XML = """<?xml version="1.0" encoding="utf-8"?>
<MRData xmlns="http://ergast.com/mrd/1.5" series="f1" limit="30" offset="0" total="3">
  <DriverTable season="2024">
    <Driver driverId="max_verstappen" code="VER" url="http://en.wikipedia.org/wiki/Max_Verstappen">
      <PermanentNumber>33</PermanentNumber>
      <GivenName>Max</GivenName>
      <FamilyName>Verstappen</FamilyName>
      <DateOfBirth>1997-09-30</DateOfBirth>
      <Nationality>Dutch</Nationality>
    </Driver>
    <Driver driverId="leclerc" code="LEC" url="http://en.wikipedia.org/wiki/Charles_Leclerc">
      <PermanentNumber>16</PermanentNumber>
      <GivenName>Charles</GivenName>
      <FamilyName>Leclerc</FamilyName>
      <DateOfBirth>1997-10-16</DateOfBirth>
      <Nationality>Monégasque</Nationality>
    </Driver>
    <Driver driverId="doohan" code="DOO">
      <GivenName>Jack</GivenName>
      <FamilyName>Doohan</FamilyName>
      <Nationality>Australian</Nationality>
    </Driver>
  </DriverTable>
</MRData>
"""

SAMPLE_SCHEDULE_JSON = {
    "MRData": {
        "series": "f1",
        "RaceTable": {
            "season": "2024",
            "Races": [
                {
                    "season": "2024",
                    "round": "1",
                    "url": "https://en.wikipedia.org/wiki/2024_Bahrain_Grand_Prix",
                    "raceName": "Bahrain Grand Prix",
                    "Circuit": {
                        "circuitId": "bahrain",
                        "url": "https://en.wikipedia.org/wiki/Bahrain_International_Circuit",
                        "circuitName": "Bahrain International Circuit",
                        "Location": {
                            "lat": "26.0325",
                            "long": "50.5106",
                            "locality": "Sakhir",
                            "country": "Bahrain",
                        },
                    },
                    "date": "2024-03-02",
                    "time": "15:00:00Z",
                },
                {
                    "season": "2024",
                    "round": "12",
                    "url": "https://en.wikipedia.org/wiki/2024_British_Grand_Prix",
                    "raceName": "British Grand Prix",
                    "Circuit": {
                        "circuitId": "silverstone",
                        "circuitName": "Silverstone Circuit",
                        "Location": {"locality": "Silverstone", "country": "UK"},
                    },
                    "date": "2024-07-07",
                },
                {
                    "season": "2024",
                    "raceName": "Abu Dhabi Grand Prix",
                    "Circuit": {
                        "circuitId": "yas_marina",
                        "Location": {"locality": "Abu Dhabi", "country": "UAE"},
                    },
                },
            ],
        },
    }
}

SAMPLE_RESULTS_XML = """<?xml version="1.0" encoding="utf-8"?>
<MRData xmlns="http://ergast.com/mrd/1.5" series="f1" total="3">
  <RaceTable season="2024" round="1">
    <Race season="2024" round="1" url="https://en.wikipedia.org/wiki/2024_Bahrain_Grand_Prix">
      <RaceName>Bahrain Grand Prix</RaceName>
      <Circuit circuitId="bahrain" url="https://en.wikipedia.org/wiki/Bahrain_International_Circuit">
        <CircuitName>Bahrain International Circuit</CircuitName>
        <Location lat="26.0325" long="50.5106">
          <Locality>Sakhir</Locality>
          <Country>Bahrain</Country>
        </Location>
      </Circuit>
      <Date>2024-03-02</Date>
      <Time>15:00:00Z</Time>
      <ResultsList>
        <Result number="1" position="1" positionText="1" points="26">
          <Driver driverId="max_verstappen" code="VER" url="http://en.wikipedia.org/wiki/Max_Verstappen">
            <PermanentNumber>33</PermanentNumber>
            <GivenName>Max</GivenName>
            <FamilyName>Verstappen</FamilyName>
            <DateOfBirth>1997-09-30</DateOfBirth>
            <Nationality>Dutch</Nationality>
          </Driver>
          <Constructor constructorId="red_bull" url="http://en.wikipedia.org/wiki/Red_Bull_Racing">
            <Name>Red Bull</Name>
            <Nationality>Austrian</Nationality>
          </Constructor>
          <Grid>1</Grid>
          <Laps>57</Laps>
          <Status statusId="1">Finished</Status>
          <Time millis="5504742">1:31:44.742</Time>
          <FastestLap rank="1" lap="39">
            <Time>1:32.608</Time>
            <AverageSpeed units="kph">210.383</AverageSpeed>
          </FastestLap>
        </Result>
        <Result number="24" position="19" positionText="19" points="0">
          <Driver driverId="zhou" code="ZHO">
            <GivenName>Guanyu</GivenName>
            <FamilyName>Zhou</FamilyName>
            <Nationality>Chinese</Nationality>
          </Driver>
          <Constructor constructorId="sauber">
            <Name>Sauber</Name>
            <Nationality>Swiss</Nationality>
          </Constructor>
          <Grid>20</Grid>
          <Laps>56</Laps>
          <Status statusId="11">+1 Lap</Status>
        </Result>
        <Result number="2" positionText="R" points="0">
          <Driver driverId="sargeant" code="SAR">
            <GivenName>Logan</GivenName>
            <FamilyName>Sargeant</FamilyName>
            <Nationality>American</Nationality>
          </Driver>
          <Status statusId="130">Collision damage</Status>
          <FastestLap rank="18" lap="40">
            <Time>1:35.000</Time>
          </FastestLap>
        </Result>
      </ResultsList>
    </Race>
  </RaceTable>
</MRData>
"""

SAMPLE_STANDINGS_XML = """<?xml version="1.0" encoding="utf-8"?>
<MRData xmlns="http://ergast.com/mrd/1.5" series="f1">
  <StandingsTable season="2024" round="24">
    <StandingsList season="2024" round="24">
      <ConstructorStanding position="1" positionText="1" points="666" wins="6">
        <Constructor constructorId="mclaren" url="http://en.wikipedia.org/wiki/McLaren">
          <Name>McLaren</Name>
          <Nationality>British</Nationality>
        </Constructor>
      </ConstructorStanding>
      <ConstructorStanding position="10" positionText="10" points="4" wins="0">
        <Constructor constructorId="sauber" url="http://en.wikipedia.org/wiki/Sauber_Motorsport">
          <Name>Sauber</Name>
          <Nationality>Swiss</Nationality>
        </Constructor>
      </ConstructorStanding>
      <ConstructorStanding>
        <Constructor/>
      </ConstructorStanding>
    </StandingsList>
  </StandingsTable>
</MRData>
"""

SAMPLE_DRIVER_ARTICLE = """<html><body>
<div class="mw-parser-output">
  <table class="infobox vcard">
    <tbody>
      <tr><th class="infobox-label">Height</th><td class="infobox-data">1.81 m (5 ft 11 in)</td></tr>
      <tr><th class="infobox-header" colspan="2">Formula One World Championship career</th></tr>
      <tr><th class="infobox-label">Nationality</th><td>Dutch</td></tr>
      <tr><th class="infobox-label">2024 team</th><td>Red Bull Racing-Honda RBPT<sup>[1]</sup></td></tr>
      <tr><th class="infobox-label">Entries</th><td>209 (209 starts)</td></tr>
      <tr><th class="infobox-label">Championships</th><td>4 (2021, 2022, 2023, 2024)</td></tr>
      <tr><th class="infobox-label">Wins</th><td>63</td></tr>
      <tr><th class="infobox-label">Podiums</th><td>112</td></tr>
      <tr><th class="infobox-label">Career points</th><td>3,023.5</td></tr>
      <tr><th class="infobox-label">Pole positions</th><td>40</td></tr>
      <tr><th class="infobox-label">Fastest laps</th><td>32</td></tr>
      <tr><th class="infobox-label">First entry</th><td>2015 Australian Grand Prix</td></tr>
      <tr><th class="infobox-label">First win</th><td>2016 Spanish Grand Prix</td></tr>
      <tr><th class="infobox-label">Last win</th><td>2024 Qatar Grand Prix</td></tr>
      <tr><th class="infobox-label">Last entry</th><td>2024 Abu Dhabi Grand Prix</td></tr>
      <tr><th class="infobox-label">2024 position</th><td>1st (437 pts)</td></tr>
    </tbody>
  </table>
  <p>Introduction.</p>
  <div class="mw-heading mw-heading2"><h2 id="Formula_One_career">Formula One career</h2></div>
  <p>Career summary.</p>
  <ul>
    <li>2015: with Toro Rosso</li>
    <li>Test driver only</li>
    <li>2016–present: with Red Bull Racing</li>
  </ul>
  <div class="mw-heading mw-heading2"><h2 id="Helmet">Helmet</h2></div>
  <ul><li>Designed with Jens Munser</li></ul>
</div>
</body></html>
"""

SAMPLE_TEAM_ARTICLE = """<html><body>
<table class="infobox">
  <tr><td><img src="//upload.wikimedia.org/photo.jpg" width="400" height="300"></td></tr>
  <tr><td><img src="//upload.wikimedia.org/mclaren_logo.svg" width="220" height="60"></td></tr>
</table>
</body></html>
"""


# ── Fakes ────────────────────────────────────────────────────────────────────


class RecordingProbe:
    """Image probe that accepts a fixed set of URLs and records every call."""

    def __init__(self, accepted: set[str] | None = None) -> None:
        self.accepted = accepted or set()
        self.calls: list[str] = []

    async def __call__(self, url: str) -> bool:
        self.calls.append(url)
        return url in self.accepted


class FakeArticles:
    """In-memory article fetcher keyed by path segment."""

    def __init__(self, pages: dict[str, str]) -> None:
        self.pages = pages
        self.requested: list[str] = []

    async def fetch_article(self, path_segment: str) -> str:
        self.requested.append(path_segment)
        if path_segment not in self.pages:
            raise FeedConnectionError(f"unreachable: {path_segment}")
        return self.pages[path_segment]


@pytest.fixture(autouse=True)
def _call_log_in_tmp(tmp_path):
    """Keep the call log file out of the working tree."""
    old_dir = api_logging._LOG_DIR
    api_logging.set_log_dir(tmp_path / "logs")
    yield
    api_logging.set_log_dir(old_dir)


@pytest.fixture
def feed_url() -> str:
    return FEED_URL
