from __future__ import annotations

import pytest

from core.data import Record


SAMPLE_CSV = (
    "Goals,Tasks,Team,Priority,Owner,Status,ETA,CompletionDate,Links,Notes\n"
    '"Launch X","Design",Marketing,P0,Ana,In Progress,2025-01-01,,,\n'
    ",,,,,,,,, \n"
    '"Launch Y","Build",Eng,P1,Ben,Completed,2025-02-01,2025-02-10,,\n'
)


@pytest.fixture
def sample_csv() -> str:
    return SAMPLE_CSV


@pytest.fixture
def records() -> list:
    return [
        Record(id="1", goals="Mission25 - Brand", tasks="Testimonials", team="Marketing", priority="P0", owner="Anurag Kumar", status="In Progress"),
        Record(id="2", goals="Dealer Shows", tasks="State shows", team="Marketing", priority="High", owner="Sarah Johnson", status="Ongoing"),
        Record(id="3", goals="Referral Program", tasks="Design", team="Partnerships", priority="P0", owner="Michael Chen", status="To be picked"),
        Record(id="4", goals="Platform Launch", tasks="Build", team="Engineering", priority="Low", owner="Anurag Kumar", status="Completed", eta="2025-11-30", completion_date="2025-11-28"),
        Record(id="5", goals="Podcast Series", tasks="Influencers", team="", priority="", owner="Emily Rodriguez", status="Blocked"),
    ]
