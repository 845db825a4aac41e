import asyncio

import pytest

from subenum.core.worker import ResolutionWorker
from subenum.engines.base_engine import LookupTimeout, NameNotFound
from subenum.models import OutcomeKind

from .fakes import HANG, FakeResolver


def resolve(resolver, name, timeout=0.2):
    worker = ResolutionWorker(resolver, timeout)
    return asyncio.run(worker.resolve(name))


def test_address_records_are_resolved():
    resolver = FakeResolver({'www.example.com': ['93.184.216.34', '2606:2800:220:1::']})
    outcome = resolve(resolver, 'www.example.com')
    assert outcome.kind is OutcomeKind.RESOLVED
    assert outcome.records == ('93.184.216.34', '2606:2800:220:1::')
    assert outcome.name == 'www.example.com'
    assert outcome.elapsed >= 0


def test_nxdomain_is_not_found():
    outcome = resolve(FakeResolver({'mail.example.com': NameNotFound('mail.example.com')}), 'mail.example.com')
    assert outcome.kind is OutcomeKind.NOT_FOUND
    assert outcome.records == ()


def test_empty_answer_is_not_found():
    outcome = resolve(FakeResolver({'a.example.com': []}), 'a.example.com')
    assert outcome.kind is OutcomeKind.NOT_FOUND


def test_resolver_timeout_is_timed_out():
    resolver = FakeResolver({'slow.example.com': LookupTimeout('no answer')})
    outcome = resolve(resolver, 'slow.example.com')
    assert outcome.kind is OutcomeKind.TIMED_OUT
    assert outcome.error == 'no answer'


def test_no_response_within_timeout_is_timed_out():
    resolver = FakeResolver({'ghost.example.com': HANG})
    outcome = resolve(resolver, 'ghost.example.com', timeout=0.05)
    assert outcome.kind is OutcomeKind.TIMED_OUT
    assert 0.04 <= outcome.elapsed < 1


def test_other_failures_are_errors_with_cause():
    resolver = FakeResolver({'bad.example.com': ConnectionRefusedError('refused')})
    outcome = resolve(resolver, 'bad.example.com')
    assert outcome.kind is OutcomeKind.ERROR
    assert outcome.error == 'ConnectionRefusedError: refused'


@pytest.mark.parametrize('answer', [LookupTimeout('t'), RuntimeError('boom'), HANG])
def test_failed_queries_are_not_retried(answer):
    resolver = FakeResolver({'x.example.com': answer})
    resolve(resolver, 'x.example.com', timeout=0.05)
    assert resolver.calls == ['x.example.com']


def test_cancellation_is_not_swallowed():
    worker = ResolutionWorker(FakeResolver({'ghost.example.com': HANG}), timeout=10)

    async def go():
        task = asyncio.ensure_future(worker.resolve('ghost.example.com'))
        await asyncio.sleep(0.01)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(go())
