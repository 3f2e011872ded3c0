"""
Command-line interface entry points for the KANJIDIC reader.

Entry points:
- kdlookup: Look up kanji and print their records as JSON
- kdexport: Export a dictionary file to JSONL
- kdindex: Build a character -> line trie
"""
