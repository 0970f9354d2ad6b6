"""Example usage of the Kraken SDK."""

import asyncio
import os
from kraken_sdk import KrakenClient, LogLevel, APIError, PublicMethod


async def main():
    # Credentials come from the embedding application
    key = os.environ.get("KRAKEN_API_KEY")
    secret = os.environ.get("KRAKEN_API_SECRET")

    async with KrakenClient(key, secret, log_level=LogLevel.DEBUG) as client:
        # ====================================================================
        # Public endpoints
        # ====================================================================

        server_time = await client.call("Time")
        print(f"Server time: {server_time['result']['unixtime']}")

        ticker = await client.call(PublicMethod.TICKER, {"pair": "XBTUSD"})
        for pair, info in ticker["result"].items():
            print(f"{pair}: last trade {info['c'][0]}")

        # Several requests in flight at once
        assets, pairs = await asyncio.gather(
            client.call("Assets"), client.call("AssetPairs", {"pair": "XBTUSD,ETHUSD"})
        )
        print(f"\nFound {len(assets['result'])} assets, {len(pairs['result'])} pairs")

        # ====================================================================
        # Private endpoints
        # ====================================================================

        if client.credentials is None:
            print("\nSet KRAKEN_API_KEY and KRAKEN_API_SECRET to try private endpoints")
            return

        try:
            balance = await client.call("Balance")
            print("\nBalances:")
            for asset, amount in balance["result"].items():
                print(f"  - {asset}: {amount}")
        except APIError as e:
            print(f"\nKraken rejected the request: {e} (category={e.category})")


if __name__ == "__main__":
    asyncio.run(main())
