"""Static campaign table.

Campaign tokens are only honoured on the exact validity timestamp recorded
here (epoch milliseconds of midnight CET on the campaign day). The table is
read-only; unknown codes resolve to None.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from types import MappingProxyType

_CET = timezone(timedelta(hours=1))


@dataclass(frozen=True)
class Campaign:
    code: str
    valid_on: int  # epoch milliseconds
    discount: int  # percent


def _midnight_cet(year: int, month: int, day: int) -> int:
    return int(datetime(year, month, day, tzinfo=_CET).timestamp()) * 1000


CAMPAIGNS: Mapping[str, Campaign] = MappingProxyType(
    {
        campaign.code: campaign
        for campaign in (
            Campaign("WMNSDY2019", _midnight_cet(2019, 3, 8), 75),
            Campaign("WMNSDY2020", _midnight_cet(2020, 3, 8), 60),
            Campaign("WMNSDY2021", _midnight_cet(2021, 3, 8), 60),
            Campaign("WMNSDY2022", _midnight_cet(2022, 3, 8), 60),
            Campaign("WMNSDY2023", _midnight_cet(2023, 3, 8), 60),
            Campaign("ORANGE2020", _midnight_cet(2020, 5, 4), 50),
            Campaign("ORANGE2021", _midnight_cet(2021, 5, 4), 40),
            Campaign("ORANGE2022", _midnight_cet(2022, 5, 4), 40),
            Campaign("ORANGE2023", _midnight_cet(2023, 5, 4), 40),
        )
    }
)


def find_campaign(code: str, campaigns: Mapping[str, Campaign] = CAMPAIGNS) -> Campaign | None:
    return campaigns.get(code)
