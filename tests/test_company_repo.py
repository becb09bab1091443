import jobly.repos.company_repo as crepo


def test_exists(fake_session):
    db = fake_session([("c1",)])
    assert crepo.exists(db, "c1") is True
    assert db.executed[0][1] == {"p1": "c1"}


def test_exists_missing(fake_session):
    assert crepo.exists(fake_session([]), "nope") is False


def test_get_returns_plain_dict(fake_session):
    row = {"handle": "c1", "name": "C1", "description": "Desc1", "num_employees": 1, "logo_url": "http://c1.img"}
    db = fake_session([row])
    out = crepo.get(db, "c1")
    assert out == row
    assert "num_employees" in db.statements[0]


def test_get_missing(fake_session):
    assert crepo.get(fake_session([]), "nope") is None
