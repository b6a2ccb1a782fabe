"""
どこで: `common` パッケージ。
何を: 環境変数パース（`env`）、型付き設定（`settings`）、ロギング初期化（`logging`）。
なぜ: palette 本体から横断的な関心事を分離し、依存の向きを単純化するため。
"""
