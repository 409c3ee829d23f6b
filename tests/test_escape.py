from xmlpull.escape import escape_str_attribute, escape_str_pcdata


def test_escape_str_attribute():
    assert escape_str_attribute("<>'\"&\n\r") == "&lt;&gt;&apos;&quot;&amp;&#xA;&#xD;"
    assert escape_str_attribute("no_escapes") == "no_escapes"


def test_escape_str_pcdata():
    assert escape_str_pcdata("<>&") == "&lt;&gt;&amp;"
    assert escape_str_pcdata("no_escapes") == "no_escapes"


def test_escape_multibyte_code_points():
    assert escape_str_attribute("☃<") == "☃&lt;"
    assert escape_str_pcdata("☃<") == "☃&lt;"


def test_pcdata_leaves_quotes_and_newlines():
    assert escape_str_pcdata("'\"\n") == "'\"\n"