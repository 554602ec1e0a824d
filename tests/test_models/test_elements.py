"""
Tests for typed GPX elements: collections, hydration warnings and output.
"""

from datetime import datetime

import pytest

from gpx_kit.diagnostics import Diagnostics
from gpx_kit.models import (
    GPXAuthor, GPXBounds, GPXCopyright, GPXEmail, GPXExtensions, GPXLink, GPXMetadata,
    GPXPoint, GPXPointSegment, GPXRoot, GPXRoute, GPXTrack, GPXTrackPoint, GPXTrackSegment,
    GPXWaypoint, GarminTrackPointExtensions, TrailsTrackExtensions,
)
from gpx_kit.parsers import BufferScanner
from gpx_kit.utils.gpx_types import UTC, Fix


def hydrate(element_class, text, diagnostics=None):
    """Hydrate an element from a document fragment."""
    node = BufferScanner().build(text)
    return element_class.from_node(node, None, diagnostics if diagnostics is not None else Diagnostics())


class TestCollections:
    """Test identity based add and remove."""

    def setup_method(self):
        self.root = GPXRoot('test')

    def test_add_same_instance_once(self):
        waypoint = GPXWaypoint(1.0, 2.0)
        self.root.add_waypoint(waypoint)
        self.root.add_waypoint(waypoint)

        assert len(self.root.waypoints) == 1
        assert waypoint.parent is self.root

    def test_equal_values_are_distinct_elements(self):
        self.root.add_waypoints([GPXWaypoint(1.0, 2.0), GPXWaypoint(1.0, 2.0)])
        assert len(self.root.waypoints) == 2

    def test_remove_detaches(self):
        first = self.root.new_waypoint(1.0, 2.0)
        second = self.root.new_waypoint(1.0, 2.0)

        self.root.remove_waypoint(first)

        assert self.root.waypoints == [second]
        assert first.parent is None
        assert second.parent is self.root

    def test_remove_missing_element_is_ignored(self):
        self.root.new_route()
        self.root.remove_route(GPXRoute())
        assert len(self.root.routes) == 1

    def test_new_elements_are_attached(self):
        route = self.root.new_route()
        point = route.new_route_point(1.0, 2.0)
        track = self.root.new_track()
        segment = track.new_track_segment()

        assert route.parent is self.root
        assert point.parent is route
        assert track.parent is self.root
        assert segment.parent is track

    def test_links(self):
        track = GPXTrack()
        link = track.new_link('http://example.com')
        track.add_link(link)
        assert track.links == [link]

        track.remove_link(link)
        assert track.links == []
        assert link.parent is None

    def test_track_new_point_creates_segment(self):
        track = GPXTrack()
        first = track.new_track_point(1.0, 2.0)
        second = track.new_track_point(3.0, 4.0)

        assert len(track.track_segments) == 1
        assert track.track_segments[0].track_points == [first, second]

    def test_track_new_point_uses_last_segment(self):
        track = GPXTrack()
        track.new_track_segment()
        last = track.new_track_segment()

        point = track.new_track_point(1.0, 2.0)

        assert point.parent is last
        assert track.track_segments[0].track_points == []


class TestRoot:
    """Test the document root."""

    def test_empty_document(self):
        assert GPXRoot().gpx() == (
            '<?xml version="1.0" encoding="UTF-8"?>\r\n'
            '<gpx xmlns="http://www.topografix.com/GPX/1/1" version="1.1" creator="gpx_kit">\r\n'
            '</gpx>\r\n'
        )

    def test_schema(self):
        assert GPXRoot().schema == 'http://www.topografix.com/GPX/1/1'

    def test_missing_version_and_creator(self):
        diagnostics = Diagnostics()
        root = hydrate(GPXRoot, '<gpx/>', diagnostics)

        assert root.version == '1.1'
        assert root.creator == 'gpx_kit'
        assert diagnostics.get_messages() == [
            'gpx element requires version attribute.',
            'gpx element requires creator attribute.',
        ]

    def test_namespace_declarations_are_kept(self):
        root = hydrate(GPXRoot, '<gpx xmlns:gpxtpx="http://www.garmin.com/xmlschemas/TrackPointExtension/v2" '
                                'version="1.0" creator="x"/>')

        assert root.namespaces == {'gpxtpx': 'http://www.garmin.com/xmlschemas/TrackPointExtension/v2'}
        assert root.gpx().splitlines()[1] == (
            '<gpx xmlns="http://www.topografix.com/GPX/1/1" version="1.0" creator="x" '
            'xmlns:gpxtpx="http://www.garmin.com/xmlschemas/TrackPointExtension/v2">'
        )

    def test_duplicate_metadata(self):
        diagnostics = Diagnostics()
        root = hydrate(
            GPXRoot,
            '<gpx version="1.1" creator="c"><metadata><name>a</name></metadata>'
            '<metadata><name>b</name></metadata></gpx>',
            diagnostics,
        )

        assert root.metadata.name == 'a'
        assert diagnostics.get_messages() == ['gpx element has more than one metadata element.']

    def test_keywords_from_metadata(self):
        root = GPXRoot()
        assert root.keywords is None

        root.metadata = GPXMetadata()
        root.metadata.keywords = 'Mystic River, Boston,trails'
        assert root.keywords == ['Mystic River', 'Boston', 'trails']

    def test_root_keywords_take_precedence(self):
        root = hydrate(
            GPXRoot,
            '<gpx version="1.1" creator="c"><metadata><keywords>a, b</keywords></metadata>'
            '<keywords>c</keywords></gpx>',
        )
        assert root.keywords == ['c']

    def test_child_order(self):
        root = GPXRoot('c')
        root.new_track()
        root.new_route()
        root.new_waypoint(1.0, 2.0)
        root.metadata = GPXMetadata('doc')
        root.extensions = GPXExtensions()

        text = root.gpx()
        positions = [text.index(tag) for tag in ('<metadata>', '<wpt ', '<rte>', '<trk>', '<extensions>')]
        assert positions == sorted(positions)


class TestMetadata:
    """Test document metadata."""

    def test_unset_time_is_not_written(self):
        metadata = GPXMetadata('doc')
        assert '<time>' not in metadata.gpx()

        metadata.time_value = '0'
        assert '<time>' not in metadata.gpx()

    def test_time(self):
        metadata = GPXMetadata()
        metadata.time = datetime(2002, 3, 12, 18, 43, 44, tzinfo=UTC)

        assert metadata.time_value == '2002-03-12T18:43:44Z'
        assert '\t<time>2002-03-12T18:43:44Z</time>\r\n' in metadata.gpx()

    def test_full_output(self):
        metadata = GPXMetadata('Trails', 'Boston & around')
        metadata.author = GPXAuthor('Dan', GPXEmail.with_id('trails', 'example.com'))
        metadata.copyright = GPXCopyright('Dan', datetime(2002, 1, 1, tzinfo=UTC), 'CC')
        metadata.link = GPXLink('http://example.com', 'home')
        metadata.keywords = 'a, b'
        metadata.bounds = GPXBounds(42.0, -71.5, 42.5, -71.0)

        assert metadata.gpx() == (
            '<metadata>\r\n'
            '\t<name>Trails</name>\r\n'
            '\t<desc><![CDATA[Boston & around]]></desc>\r\n'
            '\t<author>\r\n'
            '\t\t<name>Dan</name>\r\n'
            '\t\t<email id="trails" domain="example.com">\r\n'
            '\t\t</email>\r\n'
            '\t</author>\r\n'
            '\t<copyright author="Dan">\r\n'
            '\t\t<year>2002-01-01T00:00:00Z</year>\r\n'
            '\t\t<license>CC</license>\r\n'
            '\t</copyright>\r\n'
            '\t<link href="http://example.com">\r\n'
            '\t\t<text>home</text>\r\n'
            '\t</link>\r\n'
            '\t<keywords>a, b</keywords>\r\n'
            '\t<bounds minlat="42.0" minlon="-71.5" maxlat="42.5" maxlon="-71.0">\r\n'
            '\t</bounds>\r\n'
            '</metadata>\r\n'
        )

    def test_invalid_copyright_year(self):
        diagnostics = Diagnostics()
        copyright = hydrate(GPXCopyright, '<copyright author="a"><year>soon</year></copyright>', diagnostics)

        assert copyright.year is None
        assert diagnostics.get_messages() == ['copyright element has an invalid year value. (value: soon)']


class TestSmallElements:
    """Test links, emails and bounds."""

    def test_link_requires_href(self):
        diagnostics = Diagnostics()
        link = hydrate(GPXLink, '<link><text>home</text><type>text/html</type></link>', diagnostics)

        assert link.href is None
        assert link.text == 'home'
        assert link.mimetype == 'text/html'
        assert diagnostics.get_messages() == ['link element requires href attribute.']

    def test_email_address(self):
        email = hydrate(GPXEmail, '<email id="trails" domain="topografix.com"/>')
        assert email.address == 'trails@topografix.com'
        assert GPXEmail.with_id('a', None).address is None

    def test_copyright_with_author(self):
        copyright = GPXCopyright.with_author('Dan')
        assert copyright.gpx() == '<copyright author="Dan">\r\n</copyright>\r\n'

    def test_bounds_attribute_order_and_clamping(self):
        bounds = GPXBounds(95.0, -71.0, 42.5, -200.0)
        assert bounds.gpx() == '<bounds minlat="0" minlon="-71.0" maxlat="42.5" maxlon="0">\r\n</bounds>\r\n'

    def test_invalid_bounds(self):
        diagnostics = Diagnostics()
        bounds = hydrate(GPXBounds, '<bounds minlat="x" minlon="1" maxlat="2"/>', diagnostics)

        assert bounds.min_latitude is None
        assert bounds.max_latitude == 2.0
        assert bounds.max_longitude is None
        assert diagnostics.get_messages() == [
            'bounds element has an invalid minlat value. (value: x)',
            'bounds element requires maxlon attribute.',
        ]


class TestWaypoint:
    """Test waypoint values and output."""

    def test_output(self):
        waypoint = GPXWaypoint(42.5, -71.25)
        waypoint.name = 'A'
        assert waypoint.gpx() == '<wpt lat="42.5" lon="-71.25">\r\n\t<name>A</name>\r\n</wpt>\r\n'

    def test_raw_values_are_written_unchanged(self):
        text = ('<trkpt lat="42.405488" lon="-71.098173">\r\n'
                '\t<ele>4.400000</ele>\r\n'
                '\t<time>2002-03-11T20:28:26Z</time>\r\n'
                '</trkpt>\r\n')
        point = hydrate(GPXTrackPoint, text)

        assert point.elevation == 4.4
        assert point.gpx() == text

    def test_typed_values(self):
        waypoint = GPXWaypoint(1.0, 2.0)
        waypoint.elevation = 12.5
        waypoint.time = datetime(2002, 3, 12, 18, 36, 28, tzinfo=UTC)
        waypoint.magnetic_variation = 400.0
        waypoint.satellites = 7
        waypoint.dgps_id = 2000
        waypoint.fix = Fix.DGPS

        assert waypoint.elevation_value == '12.5'
        assert waypoint.time_value == '2002-03-12T18:36:28Z'
        assert waypoint.magnetic_variation_value == '0'
        assert waypoint.satellites == 7
        assert waypoint.dgps_id_value == '0'
        assert waypoint.fix is Fix.DGPS
        assert waypoint.fix_value == 'dgps'

        waypoint.elevation = None
        assert waypoint.elevation_value is None
        assert waypoint.elevation is None

    def test_default_fix(self):
        assert GPXWaypoint(1.0, 2.0).fix is Fix.NONE

    def test_child_order(self):
        waypoint = GPXWaypoint(1.0, 2.0)
        waypoint.dgps_id = 5
        waypoint.symbol = 'Dot'
        waypoint.add_link(GPXLink('http://example.com'))
        waypoint.name = 'n'
        waypoint.speed = 1.5
        waypoint.course = 90.0
        waypoint.time = datetime(2002, 1, 1, tzinfo=UTC)
        waypoint.elevation = 1.0

        tags = [line.strip().split('>')[0].lstrip('<').split()[0] for line in waypoint.gpx().split('\r\n')[1:-2]]
        assert tags == ['ele', 'time', 'course', 'speed', 'name', 'link', '/link', 'sym', 'dgpsid']

    def test_missing_coordinates(self):
        diagnostics = Diagnostics()
        waypoint = hydrate(GPXWaypoint, '<wpt lon="2.5"><name>x</name></wpt>', diagnostics)

        assert waypoint.latitude is None
        assert waypoint.longitude == 2.5
        assert waypoint.name == 'x'
        assert diagnostics.get_messages() == ['wpt element requires lat attribute.']

    def test_escaped_cdata_terminator_is_restored(self):
        waypoint = hydrate(GPXWaypoint, '<wpt lat="1" lon="2"><name><![CDATA[a]]&gt;b]]></name></wpt>')
        assert waypoint.name == 'a]]>b'

    def test_escaped_terminator_outside_cdata_is_kept(self):
        waypoint = hydrate(GPXWaypoint, '<wpt lat="1" lon="2"><name>x]]&amp;gt;y</name></wpt>')
        assert waypoint.name == 'x]]&gt;y'

    def test_only_first_duplicate_value_is_used(self):
        waypoint = hydrate(GPXWaypoint, '<wpt lat="1" lon="2"><name>a</name><name>b</name></wpt>')
        assert waypoint.name == 'a'


class TestPoint:
    """Test typed points and point segments."""

    def test_output(self):
        point = GPXPoint(1.5, 2.5, 10.0, datetime(2002, 3, 12, 18, 36, 28, tzinfo=UTC))
        assert point.gpx() == (
            '<pt lat="1.5" lon="2.5">\r\n'
            '\t<ele>10.0</ele>\r\n'
            '\t<time>2002-03-12T18:36:28Z</time>\r\n'
            '</pt>\r\n'
        )

    def test_invalid_values(self):
        diagnostics = Diagnostics()
        point = hydrate(GPXPoint, '<pt lat="abc" lon="2"><ele>high</ele></pt>', diagnostics)

        assert point.latitude is None
        assert point.longitude == 2.0
        assert point.elevation is None
        assert diagnostics.get_messages() == [
            'pt element has an invalid ele value. (value: high)',
            'pt element has an invalid lat value. (value: abc)',
        ]

    def test_segment(self):
        segment = GPXPointSegment()
        first = segment.new_point(1.0, 2.0)
        segment.add_point(first)
        segment.add_points([GPXPoint(3.0, 4.0), GPXPoint()])

        assert len(segment.points) == 3
        assert segment.coordinates() == [(1.0, 2.0), (3.0, 4.0)]
        assert [record.coordinate for record in segment.locations()] == [(1.0, 2.0), (3.0, 4.0)]

        segment.remove_point(first)
        assert first.parent is None
        assert len(segment.points) == 2

    def test_segment_hydration(self):
        segment = hydrate(GPXPointSegment, '<ptseg><pt lat="1" lon="2"/><pt lat="3" lon="4"/></ptseg>')
        assert segment.coordinates() == [(1.0, 2.0), (3.0, 4.0)]
        assert segment.points[0].parent is segment


class TestExtensions:
    """Test the vendor extensions."""

    TEXT = (
        '<trkpt lat="1.0" lon="2.0">\r\n'
        '\t<extensions>\r\n'
        '\t\t<gpxtpx:TrackPointExtension>\r\n'
        '\t\t\t<gpxtpx:hr>128</gpxtpx:hr>\r\n'
        '\t\t\t<gpxtpx:cad>84</gpxtpx:cad>\r\n'
        '\t\t</gpxtpx:TrackPointExtension>\r\n'
        '\t\t<trailsio:TrackPointExtension>\r\n'
        '\t\t\t<trailsio:hacc>5.0</trailsio:hacc>\r\n'
        '\t\t\t<trailsio:steps>12</trailsio:steps>\r\n'
        '\t\t</trailsio:TrackPointExtension>\r\n'
        '\t</extensions>\r\n'
        '</trkpt>\r\n'
    )

    def test_track_point_extensions(self):
        point = hydrate(GPXTrackPoint, self.TEXT)
        extensions = point.extensions

        assert extensions.garmin.heart_rate == 128
        assert extensions.garmin.cadence == 84
        assert extensions.garmin.speed is None
        assert extensions.trails_track is None
        assert extensions.trails_track_point.horizontal_accuracy == 5.0
        assert extensions.trails_track_point.steps == 12
        assert point.gpx() == self.TEXT

    def test_track_extension(self):
        track = GPXTrack()
        track.extensions = GPXExtensions()
        track.extensions.trails_track = TrailsTrackExtensions()
        track.extensions.trails_track.activity = 'hiking'

        assert track.gpx() == (
            '<trk>\r\n'
            '\t<extensions>\r\n'
            '\t\t<trailsio:TrackExtension>\r\n'
            '\t\t\t<trailsio:activity>hiking</trailsio:activity>\r\n'
            '\t\t</trailsio:TrackExtension>\r\n'
            '\t</extensions>\r\n'
            '</trk>\r\n'
        )

    def test_typed_assignment(self):
        garmin = GarminTrackPointExtensions()
        garmin.heart_rate = 140
        garmin.speed = 3.5
        assert garmin.heart_rate_value == '140'
        assert garmin.speed_value == '3.5'


class TestSegmentOutput:
    """Test track segment child order."""

    def test_extensions_before_points(self):
        segment = GPXTrackSegment()
        segment.new_track_point(1.0, 2.0)
        segment.extensions = GPXExtensions()

        lines = segment.gpx().split('\r\n')
        assert lines[1] == '\t<extensions>'
        assert lines[3] == '\t<trkpt lat="1.0" lon="2.0">'


@pytest.mark.parametrize('element_class, tag', [
    (GPXWaypoint, 'wpt'),
    (GPXTrackPoint, 'trkpt'),
    (GPXRoute, 'rte'),
    (GPXTrackSegment, 'trkseg'),
    (GPXMetadata, 'metadata'),
])
def test_empty_elements_keep_open_and_close_tags(element_class, tag):
    assert element_class().gpx() == f'<{tag}>\r\n</{tag}>\r\n'
