from typing import Dict, Any

from ethereumreward.domain.transaction import EthTransaction
from ethereumreward.domain.wei import Wei


class EthTransactionMapper(object):
    def json_dict_to_transaction(self, json_dict: Dict[str, Any]) -> EthTransaction:
        transaction = EthTransaction()
        transaction.hash = json_dict.get("hash")
        # the declared gas price, nodes report the effective one for EIP-1559 txs
        transaction.gas_price = Wei.of(json_dict.get("gasPrice"))
        return transaction
