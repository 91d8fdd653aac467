from services.scoring.keyword_matcher import count_present, exists, keyword_variants


def test_exact_match_is_case_insensitive():
    assert exists("Python", "Skilled in PYTHON.")


def test_verbatim_term_always_matches():
    text = "Built pipelines with Apache Spark (PySpark) on AWS."
    for term in ["Apache Spark", "(PySpark)", "AWS.", "pipelines with"]:
        assert exists(term, text)


def test_dot_js_suffix_variants():
    assert exists("node.js", "experience with nodejs")
    assert exists("Node.js", "Built services in Node")
    assert exists("Vue.js", "vuejs and react")


def test_hyphen_variants():
    assert exists("CI-CD", "ci cd pipeline")
    assert exists("CI-CD", "owned the cicd setup")
    assert exists("e-commerce", "ecommerce platform")


def test_missing_term():
    assert not exists("Kubernetes", "Docker only")


def test_substring_cross_match_is_accepted():
    # "java" is contained in "javascript"
    assert exists("java", "javascript developer")


def test_leading_dot_does_not_match_everything():
    assert not exists(".NET", "python developer")
    assert exists(".NET", "asp net core")


def test_keyword_variants_node_js():
    assert keyword_variants("node.js") == ["node js", "nodejs", "node"]


def test_keyword_variants_hyphenated():
    assert keyword_variants("CI-CD") == ["ci cd", "cicd", "ci"]


def test_keyword_variants_plain_term():
    assert keyword_variants("Python") == ["python"]


def test_count_present():
    assert count_present(["python", "go", "rust"], "Python and Rust") == 2
    assert count_present(["python", "python"], "python") == 2
    assert count_present([], "python") == 0


def test_single_letter_prefix_is_not_a_variant():
    assert keyword_variants("e-commerce") == ["e commerce", "ecommerce"]
    assert keyword_variants("T-SQL") == ["t sql", "tsql"]
    assert not exists("e-commerce", "java developer")
    assert not exists("T-SQL", "python developer")
