"""
Cost Inflation Index

Notified cost inflation index (CII) values by fiscal year, used to index the
acquisition cost of a long-term capital asset. Fiscal years run April-March
and are labelled "YYYY-YY".
"""

import logging
from datetime import date
from types import MappingProxyType

logger = logging.getLogger(__name__)

COST_INFLATION_INDEX = MappingProxyType(
    {
        "2001-02": 100,
        "2002-03": 105,
        "2003-04": 109,
        "2004-05": 113,
        "2005-06": 117,
        "2006-07": 122,
        "2007-08": 129,
        "2008-09": 137,
        "2009-10": 148,
        "2010-11": 167,
        "2011-12": 184,
        "2012-13": 200,
        "2013-14": 220,
        "2014-15": 240,
        "2015-16": 254,
        "2016-17": 264,
        "2017-18": 272,
        "2018-19": 280,
        "2019-20": 289,
        "2020-21": 301,
        "2021-22": 317,
        "2022-23": 317,
        "2023-24": 331,
    }
)


def fiscal_year_label(on: date) -> str:
    """
    Return the fiscal year a date falls in.

    January-March belong to the fiscal year that started the previous April,
    so 2023-02-10 is in "2022-23" and 2023-06-01 is in "2023-24".
    """
    if on.month <= 3:
        return f"{on.year - 1}-{on.year % 100:02d}"
    return f"{on.year}-{(on.year + 1) % 100:02d}"


def latest_fiscal_year() -> str:
    """Most recent fiscal year in the table."""
    return max(COST_INFLATION_INDEX)


def latest_index() -> int:
    """Index value of the most recent fiscal year in the table."""
    return COST_INFLATION_INDEX[latest_fiscal_year()]


def lookup(on: date) -> int:
    """
    Get the cost inflation index for the fiscal year containing a date.

    Fiscal years missing from the table resolve to the latest known index
    instead of failing.
    """
    label = fiscal_year_label(on)
    index = COST_INFLATION_INDEX.get(label)
    if index is None:
        index = latest_index()
        logger.debug(
            f"No cost inflation index for {label}, "
            f"using {latest_fiscal_year()} ({index})"
        )
    return index
