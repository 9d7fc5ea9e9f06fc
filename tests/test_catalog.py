import logging

from parsing.catalog import load, parse_skills

SAMPLE = """title,company,location,salary,skills,experience,description
Frontend Developer,TechNova,Bengaluru,6-9 LPA,"JavaScript React HTML CSS",0-2 years,Build web interfaces
Full Stack Developer,CodeCraft,Pune,8-12 LPA,"React Node-js MongoDB",1-3 years,MERN features

Backend Engineer,DataBridge,Hyderabad,"₹7,00,000 - ₹11,00,000","Python SQL",0-2 years,APIs for data products


"""


def test_load_core():
    jobs = load(SAMPLE)
    assert [j.id for j in jobs] == ["1", "2", "3"]
    fs = jobs[1]
    assert fs.title == "Full Stack Developer"
    assert fs.company == "CodeCraft"
    assert fs.location == "Pune"
    assert fs.salary_range == "8-12 LPA"
    assert fs.experience_level == "1-3 years"
    assert fs.description == "MERN features"
    assert fs.required_skills == ("React", "Node js", "MongoDB")


def test_quoted_salary_with_commas():
    jobs = load(SAMPLE)
    assert jobs[2].salary_range == "₹7,00,000 - ₹11,00,000"
    assert jobs[2].required_skills == ("Python", "SQL")


def test_header_is_not_a_record():
    jobs = load("title,company\n")
    assert jobs == []


def test_empty_input():
    assert load("") == []
    assert load("   \n\n") == []


def test_short_line_is_skipped(caplog):
    text = (
        "h1,h2,h3,h4,h5,h6,h7\n"
        "Broken,Acme,Delhi\n"
        "Data Analyst,InsightWorks,Mumbai,5-8 LPA,\"Python Excel\",0-1 years,Dashboards\n"
    )
    with caplog.at_level(logging.WARNING, logger="parsing.catalog"):
        jobs = load(text)
    assert len(jobs) == 1
    assert jobs[0].id == "1"
    assert jobs[0].title == "Data Analyst"
    assert "line 2" in caplog.text


def test_empty_skills_field_is_kept():
    jobs = load("header\nRole,Co,Loc,Sal,\"\",Exp,Desc\n")
    assert len(jobs) == 1
    assert jobs[0].required_skills == ()


def test_crlf_line_endings():
    text = SAMPLE.replace("\n", "\r\n")
    assert len(load(text)) == 3


def test_parse_skills():
    assert parse_skills('"React Node-js"') == ("React", "Node js")
    assert parse_skills("Spring-Boot  REST-APIs") == ("Spring Boot", "REST APIs")
    assert parse_skills("") == ()


def test_unclosed_quote_does_not_swallow_next_lines(caplog):
    text = (
        "h1,h2,h3,h4,h5,h6,h7\n"
        "Broken,Acme,Delhi,5 LPA,\"Python SQL,0-1 years,oops\n"
        "Data Analyst,InsightWorks,Mumbai,5-8 LPA,\"Python Excel\",0-1 years,Dashboards\n"
        "Backend Engineer,DataBridge,Hyderabad,7-11 LPA,\"Python SQL\",0-2 years,APIs\n"
    )
    with caplog.at_level(logging.WARNING, logger="parsing.catalog"):
        jobs = load(text)
    assert [(j.id, j.title) for j in jobs] == [("1", "Data Analyst"), ("2", "Backend Engineer")]
    assert jobs[0].required_skills == ("Python", "Excel")
    assert "line 2" in caplog.text


def test_delimiter_only_line_is_skipped():
    jobs = load("header\n,,,,,,\n" + SAMPLE.splitlines()[1] + "\n")
    assert [j.title for j in jobs] == ["Frontend Developer"]
