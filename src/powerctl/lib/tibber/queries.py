"""GraphQL documents sent to the Tibber API."""

from __future__ import annotations

HOMES_QUERY = """
{
  viewer {
    homes {
      id
      appNickname
      size
      type
      features {
        realTimeConsumptionEnabled
      }
      address {
        address1
        address2
        address3
        postalCode
        city
        country
      }
    }
  }
}
"""

_PRICE_FIELDS = "total energy tax startsAt level currency"

# The API has no server-side filter on `homes`; the caller picks the home by id.
PRICE_INFO_QUERY = f"""
{{
  viewer {{
    homes {{
      id
      currentSubscription {{
        priceInfo {{
          current {{ {_PRICE_FIELDS} }}
          today {{ {_PRICE_FIELDS} }}
          tomorrow {{ {_PRICE_FIELDS} }}
        }}
      }}
    }}
  }}
}}
"""
