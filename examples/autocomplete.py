# autocomplete.py - prefix completions

from trie_search import Trie


def run():
    t = Trie()
    t.insert_many(["apple", "app", "application", "banana"])

    print("Suggestions for 'app':")
    for word in t.suggest("app"):
        print("  " + word)


if __name__ == "__main__":
    run()
