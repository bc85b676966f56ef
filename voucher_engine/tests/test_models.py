"""Serialization and address resolution tests for voucher models."""

import unittest

from voucher_engine.addresses import is_native, same_address, to_address
from voucher_engine.models import (
    NATIVE_CURRENCY,
    AddressResolutionError,
    AssetEntry,
    FunctionCall,
    InternalVoucherRequest,
    MultichainAddress,
    SymbolicAmount,
    ValueCall,
    VoucherRequest,
    amount_from_json,
    call_to_dict,
)


class VoucherModelTests(unittest.TestCase):
    def test_request_from_dict(self) -> None:
        request = VoucherRequest.from_dict(
            {
                "request_id": "v-7",
                "destination_chain_id": "8453",
                "tokens": [
                    {"token": NATIVE_CURRENCY, "amount": "1000000000000000000000"},
                    {"token": {"10": "0xabc", "1": "0xdef"}, "amount": 5},
                    {"token": "0x123", "amount": {"runtime_var": "bridge_out"}},
                ],
            }
        )

        self.assertEqual(request.destination_chain_id, 8453)
        self.assertEqual(request.tokens[0].amount, 10**21)
        self.assertEqual(
            request.tokens[1].token,
            MultichainAddress(addresses=((1, "0xdef"), (10, "0xabc"))),
        )
        self.assertEqual(request.tokens[2].amount, SymbolicAmount("bridge_out"))
        self.assertEqual(VoucherRequest.from_dict(request.to_dict()), request)

    def test_invalid_amounts_rejected(self) -> None:
        for value in (1.5, -5, "-3", "abc", True, {"runtime_var": ""}, None):
            with self.assertRaises(ValueError):
                amount_from_json(value)

    def test_invalid_token_rejected(self) -> None:
        with self.assertRaises(ValueError):
            AssetEntry.from_dict({"token": "", "amount": 1})
        with self.assertRaises(ValueError):
            AssetEntry.from_dict({"token": {"mainnet": "0xabc"}, "amount": 1})

    def test_call_to_dict_resolves_contract_target(self) -> None:
        paymaster = MultichainAddress(addresses=((1, "0xpay1"), (10, "0xpay10")))
        record = InternalVoucherRequest(
            origin_chain_id=10,
            request_id="v-1",
            destination_chain_id=1,
            assets=(("0xabc", SymbolicAmount("x")),),
        )
        lock = FunctionCall(
            target=paymaster,
            function_name="lockUserDeposit",
            args=(record,),
            value=1010,
        )

        payload = call_to_dict(lock, 10)

        self.assertEqual(payload["target"], "0xpay10")
        self.assertEqual(payload["value"], 1010)
        self.assertEqual(
            payload["args"][0]["assets"],
            [{"token": "0xabc", "amount": {"runtime_var": "x"}}],
        )

    def test_call_to_dict_omits_missing_value(self) -> None:
        approve = FunctionCall(target="0xabc", function_name="approve", args=("0xpay", 5))
        self.assertEqual(
            call_to_dict(approve, 1),
            {"target": "0xabc", "function_name": "approve", "args": ["0xpay", 5]},
        )
        self.assertEqual(
            call_to_dict(ValueCall(target="0xabc", value=3), 1),
            {"target": "0xabc", "value": 3},
        )


class AddressResolutionTests(unittest.TestCase):
    def test_plain_address_passes_through(self) -> None:
        self.assertEqual(to_address(1, "0xabc"), "0xabc")
        self.assertEqual(to_address(1, NATIVE_CURRENCY), NATIVE_CURRENCY)

    def test_multichain_unknown_chain_fails(self) -> None:
        token = MultichainAddress(addresses=((1, "0xabc"),))
        with self.assertRaises(AddressResolutionError):
            to_address(2, token)

    def test_address_comparison_ignores_case(self) -> None:
        self.assertTrue(same_address("0xABCdef", "0xabcDEF"))
        self.assertTrue(is_native(NATIVE_CURRENCY))
        self.assertFalse(is_native("0x0000000000000000000000000000000000000001"))


if __name__ == "__main__":
    unittest.main()
