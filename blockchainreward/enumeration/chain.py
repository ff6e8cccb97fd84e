class Chain:
    ETHEREUM = "ethereum"
    ETHC = "ethc"  # ethereum classic
    ETHW = "ethw"  # ethereum pow, forked at the merge
    CUSTOM = "custom"  # reward schedule given by a yaml file

    ALL_ETHEREUM_FORKS = [
        ETHEREUM,
        ETHC,
        ETHW,
        CUSTOM,
    ]

    CHAIN_SYMBOLS = {
        ETHEREUM: "ETH",
        ETHC: "ETC",
        ETHW: "ETHW",
    }

    @staticmethod
    def symbol(chain: str) -> str:
        return Chain.CHAIN_SYMBOLS.get(chain, "ETH")
