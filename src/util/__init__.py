"""
どこで: `util` パッケージ。
何を: YAML 構成の読込、エクスポート先パス、現在のパレット状態の保持。
"""
