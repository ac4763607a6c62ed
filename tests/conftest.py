import gzip

import pytest

SAMPLE_TCX = """<?xml version="1.0" encoding="UTF-8"?>
<TrainingCenterDatabase
  xsi:schemaLocation="http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2 http://www.garmin.com/xmlschemas/TrainingCenterDatabasev2.xsd"
  xmlns:ns5="http://www.garmin.com/xmlschemas/ActivityGoals/v1"
  xmlns:ns3="http://www.garmin.com/xmlschemas/ActivityExtension/v2"
  xmlns:ns2="http://www.garmin.com/xmlschemas/UserProfile/v2"
  xmlns="http://www.garmin.com/xmlschemas/TrainingCenterDatabase/v2"
  xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance"
  xmlns:xsd="http://www.w3.org/2001/XMLSchema">
  <Activities>
    <Activity Sport="Running">
      <Id>2024-05-27T12:00:00.000Z</Id>
      <Lap StartTime="2024-05-27T12:00:00.000Z">
        <TotalTimeSeconds>600.5</TotalTimeSeconds>
        <DistanceMeters>2000.25</DistanceMeters>
        <MaximumSpeed>4.5</MaximumSpeed>
        <Calories>150</Calories>
        <Intensity>Active</Intensity>
        <TriggerMethod>Manual</TriggerMethod>
        <Track>
          <Trackpoint>
            <Time>2024-05-27T12:00:01.000Z</Time>
            <Position>
              <LatitudeDegrees>38.5</LatitudeDegrees>
              <LongitudeDegrees>-120.25</LongitudeDegrees>
            </Position>
            <AltitudeMeters>1000.5</AltitudeMeters>
            <HeartRateBpm>
              <Value>100</Value>
            </HeartRateBpm>
            <Cadence>80</Cadence>
            <Extensions>
              <ns3:TPX>
                <ns3:Speed>2.0</ns3:Speed>
              </ns3:TPX>
            </Extensions>
          </Trackpoint>
          <Trackpoint>
            <Time>2024-05-27T12:00:02.000Z</Time>
            <HeartRateBpm>
              <Value>120</Value>
            </HeartRateBpm>
            <Extensions>
              <ns3:TPX>
                <ns3:Speed>3.0</ns3:Speed>
              </ns3:TPX>
            </Extensions>
          </Trackpoint>
        </Track>
      </Lap>
      <Lap StartTime="2024-05-27T12:10:00.000Z">
        <TotalTimeSeconds>300</TotalTimeSeconds>
        <DistanceMeters>1000</DistanceMeters>
        <Track>
          <Trackpoint>
            <Time>2024-05-27T12:10:01.000Z</Time>
            <HeartRateBpm>
              <Value>140</Value>
            </HeartRateBpm>
            <Extensions>
              <ns3:TPX>
                <ns3:Speed>4.0</ns3:Speed>
              </ns3:TPX>
            </Extensions>
          </Trackpoint>
        </Track>
      </Lap>
      <Creator xsi:type="Device_t">
        <Name>Forerunner 945</Name>
        <UnitId>3950000000</UnitId>
        <ProductID>3113</ProductID>
      </Creator>
    </Activity>
  </Activities>
</TrainingCenterDatabase>
"""


@pytest.fixture
def sample_tcx():
    return SAMPLE_TCX


@pytest.fixture
def sample_tcx_path(tmp_path):
    tcx_path = tmp_path / "sample.tcx"
    tcx_path.write_text(SAMPLE_TCX, encoding="utf-8")
    return tcx_path


@pytest.fixture
def sample_tcx_gz_path(tmp_path):
    gz_path = tmp_path / "sample.tcx.gz"
    with gzip.open(gz_path, "wb") as f:
        # Garmin exports are often padded with leading whitespace
        f.write(b"\n   " + SAMPLE_TCX.encode("utf-8"))
    return gz_path
