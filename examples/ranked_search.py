# ranked_search.py - typo-tolerant ranking of the whole vocabulary

from trie_search import Trie


def run():
    t = Trie()
    t.insert_many(["hello", "hallo", "hullo", "help", "world"])

    print("Ranked results for 'helo':")
    for word, score in t.search_ranked_with_scores("helo", 3):
        print(f"  {word:8} {score:.3f}")


if __name__ == "__main__":
    run()
