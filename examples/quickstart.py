from __future__ import annotations

import dataclasses
import logging
import sys

from aethokit import Aethokit, AethokitConfig, AethokitError


def main(argv: list[str]) -> int:
    # Assumes AETHOKIT_GAS_KEY is set. The transaction must already be
    # partially signed by the sender with the gas address as fee payer,
    # then serialized and base64-encoded, e.g. with solders:
    #   message = Message.new_with_blockhash([ix], Pubkey.from_string(gas_address), blockhash)
    #   tx = Transaction.new_unsigned(message); tx.partial_sign([sender], blockhash)
    #   base64.b64encode(bytes(tx)).decode()
    logging.basicConfig(level=logging.DEBUG)

    config = AethokitConfig.from_env()
    if config.rpc_or_network is None:
        config = dataclasses.replace(config, rpc_or_network="devnet")

    try:
        with Aethokit(config) as client:
            gas_address = client.get_gas_address()
            print("Gas address:", gas_address)

            if len(argv) < 2:
                print("Pass a base64 partially-signed transaction to sponsor it.")
                return 0

            tx_hash = client.sponsor_tx(argv[1])
            print("Hash:", tx_hash)
    except AethokitError as exc:
        print(f"Sponsorship failed: {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv))
