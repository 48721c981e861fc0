"""Shared milestone and process records."""

import pytest

ACCESSIONED_V2 = [
    {"name": "registered", "timestamp": "2013-04-03T15:01:57-0700"},
    {"name": "digitized", "timestamp": "2013-04-03T16:20:19-0700"},
    {"name": "submitted", "timestamp": "2013-04-16T14:18:20-0700", "version": "1"},
    {"name": "described", "timestamp": "2013-04-16T14:32:54-0700", "version": "1"},
    {"name": "published", "timestamp": "2013-04-16T14:55:10-0700", "version": "1"},
    {"name": "deposited", "timestamp": "2013-07-21T05:27:23-0700", "version": "1"},
    {"name": "accessioned", "timestamp": "2013-07-21T05:28:09-0700", "version": "1"},
    {"name": "opened", "timestamp": "2013-08-15T11:59:16-0700", "version": "2"},
    {"name": "submitted", "timestamp": "2013-10-01T12:01:07-0700", "version": "2"},
    {"name": "described", "timestamp": "2013-10-01T12:01:24-0700", "version": "2"},
    {"name": "published", "timestamp": "2013-10-01T12:05:38-0700", "version": "2"},
    {"name": "deposited", "timestamp": "2013-10-01T12:10:56-0700", "version": "2"},
    {"name": "accessioned", "timestamp": "2013-10-01T12:11:10-0700", "version": "2"},
]

# v2 deposited but not yet accessioned
DEPOSITED_V2 = ACCESSIONED_V2[:-1]

OPEN_VERSION = [
    {"name": "described", "timestamp": "2012-11-06T16:19:15-0800", "version": "2"},
    {"name": "opened", "timestamp": "2012-11-06T16:21:02-0800"},
    {"name": "submitted", "timestamp": "2012-11-06T16:30:03-0800"},
    {"name": "described", "timestamp": "2012-11-06T16:35:00-0800"},
    {"name": "published", "timestamp": "2012-11-06T16:59:39-0800", "version": "3"},
    {"name": "published", "timestamp": "2012-11-06T16:59:39-0800"},
]

ASSEMBLY_WF = [
    {
        "version": "1",
        "laneId": "default",
        "elapsed": "0.0",
        "attempts": "1",
        "datetime": "2013-02-18T14:40:25-0800",
        "status": "completed",
        "name": "start-assembly",
    },
    {
        "version": "1",
        "laneId": "default",
        "elapsed": "0.509",
        "attempts": "1",
        "datetime": "2013-02-18T14:42:24-0800",
        "status": "completed",
        "name": "jp2-create",
    },
    {
        "version": "2",
        "laneId": "default",
        "elapsed": "0.509",
        "attempts": "1",
        "datetime": "2013-02-18T14:42:24-0800",
        "status": "waiting",
        "name": "jp2-create",
    },
]


@pytest.fixture
def accessioned_v2():
    return ACCESSIONED_V2


@pytest.fixture
def deposited_v2():
    return DEPOSITED_V2


@pytest.fixture
def open_version():
    return OPEN_VERSION


@pytest.fixture
def assembly_wf():
    return ASSEMBLY_WF
