#!/usr/bin/env python3
import unittest
from datetime import datetime, timezone

from app.adapters import detect_payload_kind, extract_tags, normalize_payload
from app.formatters import build_card
from app.models import Tag

ISSUE_PAYLOAD = {
    "action": "created",
    "installation": {"uuid": "a8e5d37a-696c-4c54-adb5-b3f28d64c7de"},
    "data": {
        "issue": {
            "id": "1170820242",
            "shortId": "CHECKOUT-1A",
            "title": "ZeroDivisionError: division by zero",
            "culprit": "app/handlers/cart.py in total",
            "level": "Error",
            "status": "unresolved",
            "platform": "python",
            "priority": "High",
            "count": "12",
            "firstSeen": "2024-03-01T08:00:00.123000Z",
            "lastSeen": "2024-03-05T14:07:09Z",
            "web_url": "https://sentry.io/organizations/acme/issues/1170820242/",
            "project": {"id": "2", "name": "checkout-api", "slug": "checkout-api", "platform": "python"},
            "metadata": {"type": "ZeroDivisionError", "value": "division by zero"},
        }
    },
    "actor": {"type": "application", "id": "sentry", "name": "Sentry"},
}

EVENT_ALERT_PAYLOAD = {
    "action": "triggered",
    "data": {
        "event": {
            "event_id": "ec3f5b1e6dd64c0d9bd6ef43c1b6c8a5",
            "project": 5,
            "project_name": "web-frontend",
            "issue_id": "4410923356",
            "title": "TypeError: undefined is not a function",
            "level": "warning",
            "culprit": "src/cart.js",
            "platform": "javascript",
            "datetime": "2024-03-05T14:07:09.000000Z",
            "user": {"id": "99", "email": "bob@acme.io", "ip_address": "10.0.0.1"},
            "tags": [["environment", "staging"], ["browser", "Chrome 122"]],
            "web_url": "https://sentry.io/organizations/acme/issues/55/events/ec3f/",
        },
        "triggered_rule": "Notify on any new error",
    },
}

LEGACY_PAYLOAD = {
    "project": "billing",
    "message": "Falha ao gerar boleto",
    "url": "https://sentry.io/acme/billing/issues/7/",
    "environment": "production",
    "culprit": "billing.invoice in render",
    "timestamp": "2024-03-05T14:07:09Z",
    "event": {"level": "FATAL", "title": "RuntimeError: template missing", "platform": "python"},
    "user": {"username": "carol"},
    "tags": [{"key": "release", "value": "1.4.2"}],
}


class TestPayloadKind(unittest.TestCase):
    def test_kinds(self):
        self.assertEqual(detect_payload_kind(ISSUE_PAYLOAD), 'issue')
        self.assertEqual(detect_payload_kind(EVENT_ALERT_PAYLOAD), 'event_alert')
        self.assertEqual(detect_payload_kind(LEGACY_PAYLOAD), 'legacy')
        self.assertEqual(detect_payload_kind({}), 'legacy')


class TestIssuePayload(unittest.TestCase):
    def test_fields(self):
        event = normalize_payload(ISSUE_PAYLOAD)
        self.assertEqual(event.project, 'checkout-api')
        self.assertEqual(event.title, 'ZeroDivisionError: division by zero')
        self.assertEqual(event.level, 'error')
        self.assertEqual(event.priority, 'high')
        self.assertEqual(event.short_id, 'CHECKOUT-1A')
        self.assertEqual(event.count, 12)
        self.assertEqual(event.status, 'unresolved')
        self.assertEqual(event.platform, 'python')
        self.assertEqual(event.action, 'created')
        self.assertEqual(event.url, 'https://sentry.io/organizations/acme/issues/1170820242/')
        self.assertEqual(event.timestamp, datetime(2024, 3, 5, 14, 7, 9, tzinfo=timezone.utc))
        self.assertEqual(event.first_seen.date().isoformat(), '2024-03-01')

    def test_bad_values_degrade(self):
        payload = {"action": "created", "data": {"issue": {
            "title": "x", "level": "critical", "priority": "urgent", "count": "muitos", "firstSeen": "ontem",
        }}}
        event = normalize_payload(payload)
        self.assertEqual(event.level, 'unknown')
        self.assertEqual(event.priority, 'unknown')
        self.assertEqual(event.count, 0)
        self.assertIsNone(event.first_seen)
        self.assertEqual(event.project, '')

    def test_fraction_of_any_width_is_parsed(self):
        for first_seen in ["2024-03-01T08:00:00.12Z", "2024-03-01T08:00:00.1234Z", "2024-03-01T08:00:00.391000Z"]:
            payload = {"action": "created", "data": {"issue": {"title": "x", "firstSeen": first_seen}}}
            event = normalize_payload(payload)
            self.assertIsNotNone(event.first_seen, first_seen)
            self.assertEqual(event.first_seen.replace(microsecond=0),
                             datetime(2024, 3, 1, 8, 0, 0, tzinfo=timezone.utc))


class TestEventAlertPayload(unittest.TestCase):
    def test_fields(self):
        event = normalize_payload(EVENT_ALERT_PAYLOAD)
        self.assertEqual(event.project, 'web-frontend')
        self.assertEqual(event.level, 'warning')
        self.assertEqual(event.environment, 'staging')
        self.assertEqual(event.user.email, 'bob@acme.io')
        self.assertEqual(event.user.id, '99')
        self.assertEqual(event.action, '')
        self.assertEqual(event.priority, '')

    def test_numeric_issue_id_is_not_a_short_id(self):
        self.assertEqual(normalize_payload(EVENT_ALERT_PAYLOAD).short_id, '')

    def test_numeric_project_id_is_not_a_project_name(self):
        payload = {"action": "triggered", "data": {"event": {"project": 5, "title": "x", "level": "error"}}}
        event = normalize_payload(payload)
        self.assertEqual(event.project, '')

        labels = [w.key_value.top_label for w in build_card(event).cards[0].sections[0].widgets if w.key_value]
        self.assertNotIn('Projeto', labels)


class TestLegacyPayload(unittest.TestCase):
    def test_fields(self):
        event = normalize_payload(LEGACY_PAYLOAD)
        self.assertEqual(event.project, 'billing')
        self.assertEqual(event.title, 'RuntimeError: template missing')
        self.assertEqual(event.level, 'fatal')
        self.assertEqual(event.environment, 'production')
        self.assertEqual(event.culprit, 'billing.invoice in render')
        self.assertEqual(event.user.username, 'carol')
        self.assertEqual(event.tags, (Tag('release', '1.4.2'),))

    def test_title_falls_back_to_message(self):
        event = normalize_payload({"project": "p", "message": "algo quebrou", "event": {"level": "info"}})
        self.assertEqual(event.title, 'algo quebrou')
        self.assertEqual(event.level, 'info')


class TestTags(unittest.TestCase):
    def test_formats(self):
        self.assertEqual(extract_tags([["a", "1"]]), (Tag('a', '1'),))
        self.assertEqual(extract_tags([{"key": "a", "value": None}]), (Tag('a', ''),))
        self.assertEqual(extract_tags({"a": 2}), (Tag('a', '2'),))
        self.assertEqual(extract_tags("lixo"), ())


if __name__ == '__main__':
    unittest.main()
