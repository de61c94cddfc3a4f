import pytest

from nfevents import Dispatcher, TypeFactory


class OrderPlaced:
    def __init__(self, order_id):
        self.order_id = order_id


class ReportMailer:
    instances = 0

    def __init__(self):
        ReportMailer.instances += 1
        self.sent = []

    def handle(self, report):
        self.sent.append(report)
        return f"mailed {report}"

    def count(self, *args):
        return len(self.sent)


class Counter:
    def __init__(self):
        self.calls = 0

    def handle(self, *args):
        self.calls += 1
        return self.calls


class Broken:
    def __init__(self):
        raise RuntimeError("constructor failed")


@pytest.fixture
def factory():
    ReportMailer.instances = 0
    return TypeFactory({"ReportMailer": ReportMailer, "Counter": Counter, "Broken": Broken})


@pytest.fixture
def dispatcher(factory):
    return Dispatcher(factory)
