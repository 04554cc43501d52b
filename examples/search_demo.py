"""
拼音首字母搜尋範例

展示完整流程：
1. 以 pypinyin 生成文件用到的漢字詞典
2. 載入到 SearchSession
3. 用拼音首字母查詢，取得可交給編輯器原生搜尋的 pattern
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from phonoseek import SearchSession
from phonoseek.dictionary import generate_dictionary, render_dictionary


def demo_pinyin_search():
    """展示拼音首字母搜尋"""

    print("=" * 60)
    print("拼音首字母搜尋展示")
    print("=" * 60)
    print()

    article = (
        "我明天早上要去机场接朋友，\n"
        "顺便在机场附近买鸡肠和鸡翅。\n"
        "长城和故宫都在北京。"
    )

    dictionary_text = render_dictionary(generate_dictionary(article))

    notices = []
    session = SearchSession(
        on_event=lambda e: notices.append(e.get("message")) if e["type"] == "not_ready" else None,
    )

    # 詞典載入前的搜尋會被拒絕
    assert session.search_multibytes("jc", article) is None
    print(f"📍 載入前: {notices[-1]}")

    session.load_dictionary(dictionary_text)
    print(f"📍 詞典已載入: {len(session.mapping)} 字")
    print()

    for query in ["jc", "cc", "bj", "zz"]:
        pattern = session.search_multibytes(query, article)
        found = pattern.findall(article)
        print(f"  🔧 '{query}' → /{pattern.pattern}/  命中 {len(found)} 處: {found}")

    print()
    print("📍 擴充宿主上一次的搜尋 pattern")
    pattern = session.enrich_current_pattern("gg", article)
    print(f"  🔧 'gg' → /{pattern.pattern}/")


if __name__ == "__main__":
    demo_pinyin_search()
