from datetime import datetime
from zoneinfo import ZoneInfo

import pytest
from flask import render_template_string

from calendar_link import web

QUERY = {
    "title": "title",
    "start": "2019-02-24T10:00",
    "end": "2019-02-24T12:00",
    "zone": "Etc/UTC",
    "description": "description",
    "address": "address",
}

GOOGLE = (
    "https://calendar.google.com/calendar/render?action=TEMPLATE"
    "&dates=20190224T100000Z/20190224T120000Z"
    "&text=title&details=description&location=address"
)


def test_health(client):
    res = client.get("/health")
    assert res.status_code == 200
    assert res.data == b"ok"


def test_all_links(client):
    res = client.get("/links", query_string=QUERY)

    assert res.status_code == 200
    body = res.get_json()
    assert [link["type_key"] for link in body] == ["google", "ics", "yahoo", "webOutlook"]
    assert body[0]["url"] == GOOGLE


def test_single_link(client):
    res = client.get("/links/webOutlook", query_string=QUERY)

    assert res.status_code == 200
    assert res.get_json()["type_name"] == "Outlook.com"
    assert "&startdt=2019-02-24T10:00:00Z&" in res.get_json()["url"]


def test_unknown_provider_is_404(client):
    res = client.get("/links/bogus", query_string=QUERY)

    assert res.status_code == 404
    assert "bogus" in res.get_json()["error"]


def test_bad_event_is_400(client):
    res = client.get("/links", query_string={**QUERY, "start": "2019-02-24T13:00"})

    assert res.status_code == 400
    assert "before its start" in res.get_json()["error"]


@pytest.mark.parametrize("zone", ["Nowhere/Special", "Europe"])
def test_bad_zone_is_400(client, zone):
    res = client.get("/links/google", query_string={**QUERY, "zone": zone})

    assert res.status_code == 400
    assert zone in res.get_json()["error"]


def test_template_functions(app):
    sydney = ZoneInfo("Australia/Sydney")
    utc = ZoneInfo("Etc/UTC")
    template = (
        "{% set links = calendar_links('title', start, end, false, 'description', 'address') %}"
        "{% for link in links if link.type_key != 'ics' %}"
        '<a href="{{ link.url }}" class="calendar-type-{{ link.type_key }}">Add to {{ link.type_name }}</a>'
        "{% endfor %}"
    )

    with app.app_context():
        out = render_template_string(
            template,
            start=datetime(2019, 2, 24, 10, 0, tzinfo=sydney).astimezone(utc),
            end=datetime(2019, 2, 24, 12, 0, tzinfo=sydney).astimezone(utc),
        )

    assert out == (
        '<a href="https://calendar.google.com/calendar/render?action=TEMPLATE&amp;dates=20190223T230000Z/20190224T010000Z'
        '&amp;text=title&amp;details=description&amp;location=address" class="calendar-type-google">Add to Google</a>'
        '<a href="https://calendar.yahoo.com/?v=60&amp;view=d&amp;type=20&amp;ST=20190223T230000Z&amp;ET=20190224T010000Z'
        '&amp;TITLE=title&amp;DESC=description&amp;in_loc=address" class="calendar-type-yahoo">Add to Yahoo!</a>'
        '<a href="https://outlook.live.com/calendar/deeplink/compose?path=/calendar/action/compose&amp;rru=addevent'
        '&amp;startdt=2019-02-23T23:00:00Z&amp;enddt=2019-02-24T01:00:00Z&amp;subject=title&amp;body=description'
        '&amp;location=address" class="calendar-type-webOutlook">Add to Outlook.com</a>'
    )


def test_single_template_function(app):
    utc = ZoneInfo("Etc/UTC")
    with app.app_context():
        out = render_template_string(
            "{{ calendar_link('ics', 'title', start, end) }}",
            start=datetime(2019, 2, 24, 10, 0, tzinfo=utc),
            end=datetime(2019, 2, 24, 12, 0, tzinfo=utc),
        )
    assert out.startswith("data:text/calendar;charset=utf8;base64,")


def test_calendar_links_loop_yields_link_records(app):
    utc = ZoneInfo("Etc/UTC")
    with app.app_context():
        out = render_template_string(
            "{% for link in calendar_links('title', start, end) %}[{{ link.type_key }}|{{ link.url[:5] }}]{% endfor %}",
            start=datetime(2019, 2, 24, 10, 0, tzinfo=utc),
            end=datetime(2019, 2, 24, 12, 0, tzinfo=utc),
        )
    assert out == "[google|https][ics|data:][yahoo|https][webOutlook|https]"


def test_main_loads_env_file_and_config(monkeypatch):
    calls = []
    monkeypatch.setattr(web, "load_dotenv", lambda: calls.append("dotenv"))
    monkeypatch.setattr(web, "run_web", lambda cfg: calls.append(cfg))
    monkeypatch.setenv("PORT", "8123")

    web.main()

    assert calls[0] == "dotenv"
    assert calls[1].port == 8123
