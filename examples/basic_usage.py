# basic_usage.py - exact lookups

from trie_search import Trie


def run():
    t = Trie()
    t.insert("alice")
    t.insert("bob")

    for name in ("alice", "bob", "eve"):
        print(f"contains {name + ':':7} {t.contains(name)}")


if __name__ == "__main__":
    run()
