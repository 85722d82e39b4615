"""
Unit tests for the Citrix CEF generator
"""

import dataclasses
import re
from datetime import datetime
from ipaddress import IPv4Address

from spigot.formats import citrix_cef as cef_format

CEF_RE = re.compile(
    r'^(?P<stamp>\w{3} +\d{1,2} \d{2}:\d{2}:\d{2}) <(?P<facility>[\w]+)\.(?P<priority>\w+)> '
    r'(?P<addr>[\d.]+) CEF:(?P<cef_version>\d)\|(?P<vendor>[^|]+)\|(?P<product>[^|]+)\|'
    r'(?P<version>[^|]+)\|(?P<module>[^|]+)\|(?P<violation>[^|]+)\|(?P<severity>\d+)\|'
    r'src=(?P<src>[\d.]+) (geolocation=(?P<geo>\S+) )?spt=(?P<spt>\d+) '
    r'method=(?P<method>\w+) request=(?P<request>\S+) msg=(?P<msg>.+) '
    r'cn1=(?P<cn1>\d+) cn2=(?P<cn2>\d+) cs1=(?P<cs1>\S+) cs2=(?P<cs2>PPE\d) '
    r'cs3=(?P<cs3>[0-9a-f]{32}) cs4=(?P<cs4>\w+) cs5=(?P<cs5>\d{4}) '
    r'(cs6=(?P<cs6>\S+) )?act=(?P<act>.+)$'
)


def fixed_record(cef, **changes):
    base = dict(
        timestamp=datetime(2024, 1, 2, 3, 4, 5),
        time_layout="%b %d %H:%M:%S",
        facility="local0",
        priority="info",
        addr=IPv4Address("10.0.0.1"),
        cef_version=0,
        vendor="Citrix",
        product="NetScalar",
        version="NS11.0",
        module="APPFW",
        violation="APPFW_STARTURL",
        severity=6,
        src_addr=IPv4Address("192.0.2.10"),
        geo="",
        src_port=40000,
        method="GET",
        request="http://vpx247.example.net/FFC/CreditCardMind.html",
        message="Disallow Illegal URL.",
        event_id=42,
        tx_id=31337,
        profile="pr_ffc",
        ppe_id="PPE3",
        sess_id="00112233445566778899aabbccddeeff",
        severity_label="ALERT",
        year=2024,
        violation_category="",
        action="blocked",
    )
    base.update(changes)
    cef.record = dataclasses.replace(cef.record, **base)


class TestRendering:

    def test_line_without_optional_fields(self, cef):
        fixed_record(cef)
        assert cef.next().decode() == (
            "Jan 02 03:04:05 <local0.info> 10.0.0.1 "
            "CEF:0|Citrix|NetScalar|NS11.0|APPFW|APPFW_STARTURL|6|src=192.0.2.10 "
            "spt=40000 method=GET request=http://vpx247.example.net/FFC/CreditCardMind.html "
            "msg=Disallow Illegal URL. cn1=42 cn2=31337 cs1=pr_ffc cs2=PPE3 "
            "cs3=00112233445566778899aabbccddeeff cs4=ALERT cs5=2024 act=blocked"
        )

    def test_optional_fields_included_when_set(self, cef):
        fixed_record(
            cef,
            time_layout="%b %-d %H:%M:%S",
            geo="Europe.Ceridia.Vandor.SilverGrove.*.*",
            violation_category="web-cgi",
        )
        line = cef.next().decode()
        assert line.startswith("Jan 2 03:04:05 ")
        assert "src=192.0.2.10 geolocation=Europe.Ceridia.Vandor.SilverGrove.*.* spt=40000" in line
        assert "cs5=2024 cs6=web-cgi act=blocked" in line

    def test_generated_lines_parse(self, cef):
        for _ in range(300):
            line = cef.next().decode()
            match = CEF_RE.match(line)
            assert match, line
            assert 1 <= int(match.group("severity")) <= 10
            assert 0 <= int(match.group("spt")) <= 65535
            assert match.group("facility") in cef_format.FACILITIES
            assert match.group("priority") in cef_format.PRIORITIES
            assert match.group("act") in cef_format.ACTIONS
            if match.group("geo"):
                assert match.group("geo") in cef_format.LOCATIONS
            if match.group("cs6"):
                assert match.group("cs6") in cef_format.VIOLATION_CATEGORIES


class TestRandomize:

    def test_categorical_fields_stay_in_tables(self, cef):
        tables = {
            "time_layout": cef_format.TIME_LAYOUTS,
            "facility": cef_format.FACILITIES,
            "priority": cef_format.PRIORITIES,
            "vendor": cef_format.VENDORS,
            "product": cef_format.PRODUCTS,
            "version": cef_format.VERSIONS,
            "module": cef_format.MODULES,
            "violation": cef_format.VIOLATIONS,
            "geo": cef_format.LOCATIONS,
            "method": cef_format.METHODS,
            "request": cef_format.REQUESTS,
            "message": cef_format.MESSAGES,
            "profile": cef_format.PROFILES,
            "severity_label": cef_format.SEVERITY_LABELS,
            "violation_category": cef_format.VIOLATION_CATEGORIES,
            "action": cef_format.ACTIONS,
        }
        for _ in range(500):
            record = cef.randomize()
            for field, table in tables.items():
                assert getattr(record, field) in table, field

    def test_numeric_ranges(self, cef):
        severities = set()
        for _ in range(1000):
            record = cef.randomize()
            severities.add(record.severity)
            assert record.cef_version in (0, 1)
            assert 0 <= record.src_port <= 65535
            assert 0 <= record.event_id <= 999
            assert 0 <= record.tx_id <= 99999
            assert record.ppe_id in {f"PPE{i}" for i in range(1, 10)}
            assert len(record.sess_id) == 32
            assert record.year == record.timestamp.year
        assert severities == set(range(1, 11))

    def test_optional_fields_sometimes_empty(self, cef):
        records = [cef.randomize() for _ in range(2000)]
        assert any(r.geo == "" for r in records)
        assert any(r.geo != "" for r in records)
        assert any(r.violation_category == "" for r in records)
