SERVER = "https://ftc.test/v2.0"
